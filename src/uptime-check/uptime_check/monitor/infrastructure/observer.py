"""Structlog implementation of the MonitorObserver port."""

import structlog
from structlog.typing import FilteringBoundLogger


class StructlogMonitorObserver:
    """Delegates run-level events to structlog.

    ``run.completed`` is the last record of every run; its ``incident`` field is
    what the next run's notification gate looks for. The record never
    includes the URL. Its fixed parts (timestamp, level, event name, decision and
    delivered fields) are in every record too, so a subject contained in them
    suppresses every later alert.

    Satisfies the MonitorObserver protocol structurally.
    """

    def __init__(self, log: FilteringBoundLogger | None = None) -> None:
        self._log = log or structlog.get_logger()

    def log_tail_read(self, path: str, last_line: str) -> None:
        self._log.debug("log.tail_read", path=path, last_line=last_line)

    def log_tail_unavailable(self, path: str, reason: str) -> None:
        self._log.debug("log.tail_unavailable", path=path, reason=reason)

    def log_sink_unavailable(self, path: str, reason: str) -> None:
        self._log.error(
            "log.sink_unavailable",
            path=path,
            reason=reason,
            message="No log will be saved",
        )

    def run_url_missing(self) -> None:
        self._log.warning(
            "run.url_missing",
            message=(
                "A URL is required to check. Neither a config file entry nor a"
                " command line flag was provided. Remaining configuration will"
                " however be saved to the config file."
            ),
        )

    def site_up(self, url: str, status_code: int) -> None:
        self._log.info("site.up", url=url, status_code=status_code)

    def site_down(
        self, url: str, status_code: int | None, transport_error: str | None
    ) -> None:
        self._log.warning(
            "site.down",
            url=url,
            status_code=status_code,
            transport_error=transport_error,
        )

    def run_completed(
        self,
        decision: str | None,
        delivered: bool,
        incident: str | None,
    ) -> None:
        fields: dict[str, str | bool | None] = {
            "decision": decision,
            "delivered": delivered,
        }
        if incident:
            fields["incident"] = incident
        self._log.info("run.completed", **fields)
