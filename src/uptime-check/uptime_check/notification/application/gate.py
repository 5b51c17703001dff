"""NotificationGate: decides whether a failed check warrants an alert, and sends it."""

from uptime_check.check.domain.result import CheckResult
from uptime_check.config.domain.settings import Settings
from uptime_check.notification.domain.decision import Decision, DispatchResult
from uptime_check.notification.domain.log_tail import LogTail
from uptime_check.notification.domain.notification import compose_notification
from uptime_check.notification.domain.notifier import Notifier
from uptime_check.notification.domain.observer import NotificationObserver
from uptime_check.notification.infrastructure.errors import (
    NotificationSendError,
    NotifierIncompleteError,
)

# Order matters only for how missing fields are reported.
_REQUIRED_FIELDS = (
    "smtp_user",
    "smtp_password",
    "smtp_host",
    "smtp_port",
    "recipient",
    "subject",
)


def missing_fields(settings: Settings) -> list[str]:
    """Return the names of required notifier settings that are empty."""
    return [name for name in _REQUIRED_FIELDS if not getattr(settings, name)]


def evaluate(result: CheckResult, log_tail: LogTail, settings: Settings) -> Decision:
    """
    Decide what to do about result, given the previous run's last log line.

    A successful check never notifies. A failure is suppressed when the last
    log line already mentions the configured subject, i.e. this incident was
    reported before: one email per incident, not one per failed check. Otherwise
    the failure notifies, or is blocked when notifier settings are incomplete.
    """
    if result.succeeded:
        return Decision.NO_ACTION

    last = log_tail.last_line
    if last and settings.subject and settings.subject in last:
        return Decision.SUPPRESSED

    if missing_fields(settings):
        return Decision.BLOCKED
    return Decision.NOTIFY


class NotificationGate:
    """Applies evaluate() and performs the resulting delivery exactly once.

    Holds no state between calls; dispatching the same inputs twice yields the
    same decision.
    """

    def __init__(self, notifier: Notifier, observer: NotificationObserver) -> None:
        self._notifier = notifier
        self._observer = observer

    def dispatch(
        self, result: CheckResult, log_tail: LogTail, settings: Settings
    ) -> DispatchResult:
        decision = evaluate(result=result, log_tail=log_tail, settings=settings)
        url = result.url
        last = log_tail.last_line

        if decision is Decision.NO_ACTION:
            self._observer.notification_not_needed(
                url=url, status_code=result.status_code
            )
            return DispatchResult(decision=decision)

        if decision is Decision.SUPPRESSED:
            self._observer.notification_suppressed(
                url=url, subject=settings.subject, last_line=last
            )
            return DispatchResult(decision=decision)

        if decision is Decision.BLOCKED:
            missing = missing_fields(settings)
            self._observer.notification_blocked(
                url=url,
                missing_fields=missing,
                reason=str(NotifierIncompleteError(missing_fields=missing)),
            )
            return DispatchResult(decision=decision, missing_fields=missing)

        self._observer.notification_required(
            url=url, subject=settings.subject, last_line=last
        )
        delivered = self._send(settings=settings, url=url)
        return DispatchResult(decision=decision, delivered=delivered)

    def _send(self, settings: Settings, url: str) -> bool:
        notification = compose_notification(settings=settings, url=url)
        self._observer.notification_sending(
            url=url,
            host=notification.host,
            port=notification.port,
            sender=notification.sender,
            recipient=notification.recipient,
            subject=notification.subject,
        )
        try:
            self._notifier.send(notification=notification)
        except NotificationSendError as exc:
            self._observer.notification_send_failed(url=url, reason=str(exc))
            return False

        self._observer.notification_sent(url=url, subject=settings.subject)
        return True
