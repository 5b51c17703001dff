"""NotificationObserver port: events emitted while deciding on and sending alerts."""

from typing import Protocol


class NotificationObserver(Protocol):
    """Observer port for notification domain events.

    Every branch of the gate emits exactly one decision event; none of them
    influence the decision itself.
    """

    def notification_not_needed(self, url: str, status_code: int | None) -> None: ...

    def notification_suppressed(self, url: str, subject: str, last_line: str) -> None: ...

    def notification_required(self, url: str, subject: str, last_line: str) -> None: ...

    def notification_blocked(
        self, url: str, missing_fields: list[str], reason: str
    ) -> None: ...

    def notification_sending(
        self, url: str, host: str, port: str, sender: str, recipient: str, subject: str
    ) -> None: ...

    def notification_sent(self, url: str, subject: str) -> None: ...

    def notification_send_failed(self, url: str, reason: str) -> None: ...
