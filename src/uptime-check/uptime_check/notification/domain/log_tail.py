"""LogTail: the bounded, most recent window of the run log.

Only the final non-empty line carries meaning: it is the last record written by
the previous run, which the notification gate inspects to avoid re-alerting.
"""

from pydantic import BaseModel, Field

TAIL_BYTES = 1024


def tail_lines(data: bytes) -> list[str]:
    """Split a raw log window into lines, dropping empty ones.

    A window that starts mid-line yields a partial first line; it is kept but
    never matters since only the last line is consulted.
    """
    text = data.decode("utf-8", errors="replace")
    return [line.rstrip("\r") for line in text.split("\n") if line.strip()]


def last_line(data: bytes) -> str:
    """Return the final non-empty line of a raw log window, or ""."""
    lines = tail_lines(data)
    return lines[-1] if lines else ""


class LogTail(BaseModel, frozen=True):
    """Read-only snapshot of the log's last TAIL_BYTES, split into lines."""

    lines: list[str] = Field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> "LogTail":
        return cls(lines=tail_lines(data))

    @property
    def last_line(self) -> str:
        return self.lines[-1] if self.lines else ""
