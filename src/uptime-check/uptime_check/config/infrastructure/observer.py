"""Structlog implementation of the ConfigObserver port."""

import structlog
from structlog.typing import FilteringBoundLogger


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self, log: FilteringBoundLogger | None = None) -> None:
        self._log = log or structlog.get_logger()

    def config_search_started(self, search_paths: list[str]) -> None:
        self._log.debug("config.search_started", search_paths=search_paths)

    def config_file_not_found(self, search_paths: list[str]) -> None:
        self._log.debug(
            "config.file_not_found",
            search_paths=search_paths,
            message="Config file not found; continuing with flags only",
        )

    def config_loaded(self, path: str) -> None:
        self._log.debug("config.loaded", path=path)

    def config_load_failed(self, path: str, reason: str) -> None:
        self._log.error("config.load_failed", path=path, reason=reason)

    def config_resolved(self, settings: dict[str, str | bool]) -> None:
        self._log.debug("config.resolved", **settings)

    def config_saved(self, path: str) -> None:
        self._log.debug("config.saved", path=path)

    def config_save_failed(self, path: str | None, reason: str) -> None:
        self._log.error("config.save_failed", path=path, reason=reason)
