"""Notifier Protocol: structural interface for alert delivery."""

from typing import Protocol

from uptime_check.notification.domain.notification import Notification


class Notifier(Protocol):
    """Delivers one notification synchronously.

    Raises NotificationSendError on failure; callers report it and carry on.
    """

    def send(self, notification: Notification) -> None: ...
