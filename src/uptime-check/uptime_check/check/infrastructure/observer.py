"""Structlog implementation of the CheckObserver port."""

import structlog
from structlog.typing import FilteringBoundLogger


class StructlogCheckObserver:
    """Delegates check domain events to structlog.

    Satisfies the CheckObserver protocol structurally.
    """

    def __init__(self, log: FilteringBoundLogger | None = None) -> None:
        self._log = log or structlog.get_logger()

    def check_started(self, url: str, timeout: float) -> None:
        self._log.debug("check.started", url=url, timeout=timeout)

    def check_responded(self, url: str, status_code: int, reason: str) -> None:
        self._log.debug(
            "check.responded", url=url, status_code=status_code, reason=reason
        )

    def check_transport_failed(self, url: str, reason: str) -> None:
        self._log.error("check.transport_failed", url=url, reason=reason)
