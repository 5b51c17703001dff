"""httpx implementation of the HttpChecker port."""

import httpx

from uptime_check.check.domain.observer import CheckObserver
from uptime_check.check.domain.result import CheckResult


class HttpxChecker:
    """Issues a single GET through httpx, following redirects like a browser would.

    Satisfies the HttpChecker protocol structurally.
    """

    def __init__(
        self, observer: CheckObserver, client: httpx.Client | None = None
    ) -> None:
        self._observer = observer
        self._client = client

    def get(self, url: str, timeout: float) -> CheckResult:
        self._observer.check_started(url=url, timeout=timeout)
        try:
            if self._client is not None:
                response = self._client.get(url, timeout=timeout, follow_redirects=True)
            else:
                with httpx.Client(timeout=timeout, follow_redirects=True) as client:
                    response = client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            reason = f"{type(exc).__name__}: {exc}"
            self._observer.check_transport_failed(url=url, reason=reason)
            return CheckResult(url=url, transport_error=reason)

        self._observer.check_responded(
            url=url,
            status_code=response.status_code,
            reason=response.reason_phrase,
        )
        return CheckResult(url=url, status_code=response.status_code)
