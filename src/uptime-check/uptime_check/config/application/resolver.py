"""ConfigResolver: loads persisted settings, merges overrides, and saves the result."""

from pathlib import Path
from typing import Protocol

from uptime_check.config.domain.loaded import LoadedConfig
from uptime_check.config.domain.observer import ConfigObserver
from uptime_check.config.domain.resolver import resolve_settings
from uptime_check.config.domain.settings import PartialSettings, Settings
from uptime_check.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigParseError,
    ConfigSaveError,
)


class ConfigStore(Protocol):
    """Structural interface of the persistence backend used by ConfigResolver."""

    def find(self, search_paths: list[Path]) -> Path: ...

    def load(self, path: Path) -> PartialSettings: ...

    def save(self, path: Path, settings: Settings) -> None: ...


class ConfigResolver:
    """Produces the effective Settings of a run and persists them afterwards.

    Load and save failures are reported through the observer and never raised:
    a missing or broken config file degrades to empty persisted settings, and a
    failed save leaves a run that already completed its check untouched.
    """

    def __init__(self, store: ConfigStore, observer: ConfigObserver) -> None:
        self._store = store
        self._observer = observer

    def load(self, search_paths: list[Path]) -> LoadedConfig:
        """Return the persisted settings found along search_paths, or empty ones."""
        searched = [str(path) for path in search_paths]
        self._observer.config_search_started(search_paths=searched)
        try:
            path = self._store.find(search_paths=search_paths)
        except ConfigLoadError:
            self._observer.config_file_not_found(search_paths=searched)
            return LoadedConfig()

        try:
            settings = self._store.load(path=path)
        except ConfigParseError as exc:
            self._observer.config_load_failed(path=str(path), reason=str(exc))
            return LoadedConfig(path=path)

        self._observer.config_loaded(path=str(path))
        return LoadedConfig(settings=settings, path=path)

    def resolve(self, persisted: PartialSettings, overrides: PartialSettings) -> Settings:
        """Merge persisted settings with overrides; see resolve_settings."""
        settings = resolve_settings(persisted=persisted, overrides=overrides)
        self._observer.config_resolved(settings=settings.redacted())
        return settings

    def persist(
        self,
        settings: Settings,
        target_path: Path | None,
        loaded_from: Path | None = None,
    ) -> Path | None:
        """
        Write settings to target_path, falling back to the file they were loaded from.

        Returns the written path, or None when the save failed (already reported).
        """
        path = target_path or loaded_from
        try:
            if path is None:
                raise ConfigSaveError(
                    path=None,
                    reason="no config file was found and no config path was given",
                )
            self._store.save(path=path, settings=settings)
        except ConfigSaveError as exc:
            self._observer.config_save_failed(
                path=str(exc.path) if exc.path is not None else None,
                reason=str(exc),
            )
            return None

        self._observer.config_saved(path=str(path))
        return path
