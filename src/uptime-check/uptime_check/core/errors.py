"""Base exception class for all uptime-check-specific errors."""


class UptimeCheckError(Exception):
    """Base class for all uptime-check errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
