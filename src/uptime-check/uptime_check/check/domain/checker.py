"""HttpChecker Protocol: structural interface for reachability probes."""

from typing import Protocol

from uptime_check.check.domain.result import CheckResult

CHECK_TIMEOUT_SECONDS = 5.0


class HttpChecker(Protocol):
    """Performs one bounded-time HTTP GET.

    Implementations never raise for network problems; they return a
    CheckResult carrying the transport error instead.
    """

    def get(self, url: str, timeout: float) -> CheckResult: ...
