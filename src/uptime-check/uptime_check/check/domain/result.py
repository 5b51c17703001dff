"""CheckResult: outcome of one HTTP reachability probe."""

from pydantic import BaseModel, Field

HTTP_OK = 200


class CheckResult(BaseModel, frozen=True):
    """Immutable probe outcome: a status code on response, or a transport error."""

    url: str = Field(min_length=1)
    status_code: int | None = None
    transport_error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.transport_error is None and self.status_code == HTTP_OK
