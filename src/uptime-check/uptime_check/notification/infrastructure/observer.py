"""Structlog implementation of the NotificationObserver port."""

import structlog
from structlog.typing import FilteringBoundLogger


class StructlogNotificationObserver:
    """Delegates notification domain events to structlog.

    Satisfies the NotificationObserver protocol structurally.
    """

    def __init__(self, log: FilteringBoundLogger | None = None) -> None:
        self._log = log or structlog.get_logger()

    def notification_not_needed(self, url: str, status_code: int | None) -> None:
        self._log.debug("notification.not_needed", url=url, status_code=status_code)

    def notification_suppressed(self, url: str, subject: str, last_line: str) -> None:
        self._log.debug(
            "notification.suppressed",
            url=url,
            subject=subject,
            last_line=last_line,
            message="Subject found in the last log entry; not sending email",
        )

    def notification_required(self, url: str, subject: str, last_line: str) -> None:
        self._log.debug(
            "notification.required",
            url=url,
            subject=subject,
            last_line=last_line,
        )

    def notification_blocked(
        self, url: str, missing_fields: list[str], reason: str
    ) -> None:
        self._log.warning(
            "notification.blocked",
            url=url,
            missing_fields=missing_fields,
            reason=reason,
        )

    def notification_sending(
        self, url: str, host: str, port: str, sender: str, recipient: str, subject: str
    ) -> None:
        self._log.debug(
            "notification.sending",
            url=url,
            host=host,
            port=port,
            sender=sender,
            recipient=recipient,
            subject=subject,
        )

    def notification_sent(self, url: str, subject: str) -> None:
        self._log.info("notification.sent", url=url, subject=subject)

    def notification_send_failed(self, url: str, reason: str) -> None:
        self._log.error("notification.send_failed", url=url, reason=reason)
