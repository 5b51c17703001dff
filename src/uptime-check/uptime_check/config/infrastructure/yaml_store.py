"""YAML config store: locates, parses and writes the ``.check.yaml`` settings file."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from uptime_check.config.domain.settings import PartialSettings, Settings
from uptime_check.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigParseError,
    ConfigSaveError,
)

CONFIG_NAME = ".check"
CONFIG_EXTENSIONS = (".yaml", ".yml")
SYSTEM_CONFIG_DIR = Path("/etc/check")


def default_search_paths(explicit: Path | None = None) -> list[Path]:
    """
    Return the config search order: explicit path > system dir > home > cwd.

    An explicit path names a file directly; the remaining entries are
    directories searched for ``.check.yaml`` / ``.check.yml``.
    """
    paths: list[Path] = []
    if explicit is not None:
        paths.append(explicit)
    paths.extend([SYSTEM_CONFIG_DIR, Path.home(), Path.cwd()])
    return paths


class YamlConfigStore:
    """Reads and writes PartialSettings / Settings as a flat YAML mapping."""

    def find(self, search_paths: list[Path]) -> Path:
        """
        Return the first existing config file along search_paths.

        Raises:
            ConfigLoadError: if no candidate exists.
        """
        for candidate in search_paths:
            if candidate.is_file():
                return candidate
            if candidate.is_dir():
                for extension in CONFIG_EXTENSIONS:
                    path = candidate / f"{CONFIG_NAME}{extension}"
                    if path.is_file():
                        return path
        raise ConfigLoadError(search_paths=search_paths)

    def load(self, path: Path) -> PartialSettings:
        """
        Parse path into PartialSettings. Unknown keys are ignored.

        Raises:
            ConfigParseError: if the file is unreadable, not valid YAML, not a
                mapping, or holds values of the wrong shape.
        """
        raw = _parse_yaml(path=path)
        if raw is None:
            return PartialSettings()
        if not isinstance(raw, dict):
            raise ConfigParseError(path=path, reason="top level is not a mapping")
        try:
            return PartialSettings.model_validate(_normalise_keys(raw))
        except ValidationError as exc:
            raise ConfigParseError(path=path, reason=str(exc)) from exc

    def save(self, path: Path, settings: Settings) -> None:
        """
        Write every settings field to path, replacing its content.

        Raises:
            ConfigSaveError: if the file cannot be written.
        """
        document = yaml.safe_dump(
            settings.to_mapping(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
        try:
            path.write_text(document, encoding="utf-8")
        except OSError as exc:
            raise ConfigSaveError(path=path, reason=exc.strerror or str(exc)) from exc


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigParseError(path=path, reason=exc.strerror or str(exc)) from exc
    except yaml.YAMLError as exc:
        raise ConfigParseError(path=path, reason=f"invalid YAML: {exc}") from exc


def _normalise_keys(raw: dict[Any, Any]) -> dict[str, Any]:
    """Lower-case keys (older files use ``URL``) and drop null values."""
    return {str(key).lower(): value for key, value in raw.items() if value is not None}
