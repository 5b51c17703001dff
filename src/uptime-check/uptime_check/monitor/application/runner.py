"""MonitorRunner: performs the check and hands its result to the notification gate."""

from uptime_check.check.domain.checker import CHECK_TIMEOUT_SECONDS, HttpChecker
from uptime_check.config.domain.settings import Settings
from uptime_check.monitor.domain.observer import MonitorObserver
from uptime_check.monitor.domain.summary import RunSummary
from uptime_check.notification.application.gate import NotificationGate
from uptime_check.notification.domain.decision import Decision, DispatchResult
from uptime_check.notification.domain.log_tail import LogTail


def _incident(settings: Settings, dispatch: DispatchResult) -> str | None:
    """The subject is recorded only when the failure is known to have been reported."""
    if dispatch.decision is Decision.SUPPRESSED:
        return settings.subject
    if dispatch.decision is Decision.NOTIFY and dispatch.delivered:
        return settings.subject
    return None


class MonitorRunner:
    """Runs one reachability check and the notification decision that follows it.

    Configuration loading and persistence stay with the caller; the runner only
    sees the already merged Settings and the log tail snapshotted before the run
    started writing.
    """

    def __init__(
        self,
        checker: HttpChecker,
        gate: NotificationGate,
        observer: MonitorObserver,
        timeout: float = CHECK_TIMEOUT_SECONDS,
    ) -> None:
        self._checker = checker
        self._gate = gate
        self._observer = observer
        self._timeout = timeout

    def run(self, settings: Settings, log_tail: LogTail) -> RunSummary:
        if not settings.has_url:
            self._observer.run_url_missing()
            return RunSummary(url_missing=True)

        result = self._checker.get(url=settings.url, timeout=self._timeout)
        if result.succeeded and result.status_code is not None:
            self._observer.site_up(url=result.url, status_code=result.status_code)
        else:
            self._observer.site_down(
                url=result.url,
                status_code=result.status_code,
                transport_error=result.transport_error,
            )

        dispatch = self._gate.dispatch(
            result=result, log_tail=log_tail, settings=settings
        )
        return RunSummary(
            url=result.url,
            status_code=result.status_code,
            transport_error=result.transport_error,
            decision=dispatch.decision,
            delivered=dispatch.delivered,
            incident=_incident(settings=settings, dispatch=dispatch),
        )
