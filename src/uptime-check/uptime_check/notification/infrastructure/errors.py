"""Error types raised by notification components."""

from uptime_check.core.errors import UptimeCheckError


class NotifierIncompleteError(UptimeCheckError):
    """Raised when the settings lack what is needed to send a notification."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        field_list = ", ".join(missing_fields)
        super().__init__(
            f"Failed to send notification: missing required settings: {field_list}"
        )


class NotificationSendError(UptimeCheckError):
    """Raised when the mail transport rejects or cannot deliver a notification."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to send notification: {reason}")


class LogReadError(UptimeCheckError):
    """Raised when the run log cannot be opened or read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to read log file {path}: {reason}")


class LogOpenError(UptimeCheckError):
    """Raised when the run log cannot be opened for appending."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to open log file {path}: {reason}")
