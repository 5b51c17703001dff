"""RunSummary: the outcome of one monitor invocation."""

from pydantic import BaseModel

from uptime_check.notification.domain.decision import Decision


class RunSummary(BaseModel, frozen=True):
    """Immutable summary returned by MonitorRunner.run.

    ``incident`` holds the subject of a failure that has been reported, either
    now or by an earlier run. It is written into the run's final log record so
    the next run's gate recognises the incident and stays quiet.
    """

    url: str = ""
    url_missing: bool = False
    status_code: int | None = None
    transport_error: str | None = None
    decision: Decision | None = None
    delivered: bool = False
    incident: str | None = None
