"""CheckObserver port: domain events emitted while probing a URL."""

from typing import Protocol


class CheckObserver(Protocol):
    def check_started(self, url: str, timeout: float) -> None: ...

    def check_responded(self, url: str, status_code: int, reason: str) -> None: ...

    def check_transport_failed(self, url: str, reason: str) -> None: ...
