"""Error types raised by config infrastructure."""

from pathlib import Path

from uptime_check.core.errors import UptimeCheckError


class ConfigLoadError(UptimeCheckError):
    """Raised when no config file exists at any of the searched locations."""

    def __init__(self, search_paths: list[Path]) -> None:
        self.search_paths = search_paths
        searched = ", ".join(str(path) for path in search_paths)
        super().__init__(f"Failed to load config: file not found in: {searched}")


class ConfigParseError(UptimeCheckError):
    """Raised when a config file exists but cannot be read or is not a YAML mapping."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to read config file {path}: {reason}")


class ConfigSaveError(UptimeCheckError):
    """Raised when settings cannot be written back to a config file."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        target = str(path) if path is not None else "<no config file>"
        super().__init__(f"Failed to save config to {target}: {reason}")
