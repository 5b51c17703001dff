"""LoadedConfig: persisted settings together with the file they came from."""

from pathlib import Path

from pydantic import BaseModel, Field

from uptime_check.config.domain.settings import PartialSettings


class LoadedConfig(BaseModel, frozen=True):
    """Immutable value object returned by ConfigResolver.load.

    ``path`` is None when no config file was found; ``settings`` is then empty.
    """

    settings: PartialSettings = Field(default_factory=PartialSettings)
    path: Path | None = None
