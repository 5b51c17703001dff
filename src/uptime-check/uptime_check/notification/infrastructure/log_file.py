"""LogFile: append-only run log that doubles as the notification history."""

import os
from pathlib import Path
from typing import TextIO

from uptime_check.notification.domain.log_tail import TAIL_BYTES, LogTail
from uptime_check.notification.infrastructure.errors import LogOpenError, LogReadError


class LogFile:
    """Reads the bounded tail of the log and opens it for appending.

    The tail must be read before this run appends anything, so that its last
    line is the final record of the previous run.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read_tail(self, max_bytes: int = TAIL_BYTES) -> LogTail:
        """
        Return the last max_bytes of the log as a LogTail, never reading the whole file.

        Raises:
            LogReadError: if the file is absent or unreadable.
        """
        try:
            with self._path.open("rb") as fh:
                size = fh.seek(0, os.SEEK_END)
                fh.seek(max(size - max_bytes, 0))
                data = fh.read(max_bytes)
        except OSError as exc:
            raise LogReadError(path=str(self._path), reason=exc.strerror or str(exc)) from exc
        return LogTail.from_bytes(data)

    def open_append(self) -> TextIO:
        """
        Open the log for appending, creating it if needed. Caller closes the handle.

        Raises:
            LogOpenError: if the file cannot be opened.
        """
        try:
            return self._path.open("a", encoding="utf-8")
        except OSError as exc:
            raise LogOpenError(path=str(self._path), reason=exc.strerror or str(exc)) from exc
