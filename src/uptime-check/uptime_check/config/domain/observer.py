"""Observer port for the config domain: defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_search_started(self, search_paths: list[str]) -> None: ...

    def config_file_not_found(self, search_paths: list[str]) -> None: ...

    def config_loaded(self, path: str) -> None: ...

    def config_load_failed(self, path: str, reason: str) -> None: ...

    def config_resolved(self, settings: dict[str, str | bool]) -> None: ...

    def config_saved(self, path: str) -> None: ...

    def config_save_failed(self, path: str | None, reason: str) -> None: ...
