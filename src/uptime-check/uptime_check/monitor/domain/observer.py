"""MonitorObserver port: run-level events of a single monitor invocation."""

from typing import Protocol


class MonitorObserver(Protocol):
    def log_tail_read(self, path: str, last_line: str) -> None: ...

    def log_tail_unavailable(self, path: str, reason: str) -> None: ...

    def log_sink_unavailable(self, path: str, reason: str) -> None: ...

    def run_url_missing(self) -> None: ...

    def site_up(self, url: str, status_code: int) -> None: ...

    def site_down(
        self, url: str, status_code: int | None, transport_error: str | None
    ) -> None: ...

    def run_completed(
        self,
        decision: str | None,
        delivered: bool,
        incident: str | None,
    ) -> None: ...
