"""structlog wiring for the CLI: renderer, level filtering and the log file tee."""

import logging
from typing import TextIO

import structlog
from structlog.typing import FilteringBoundLogger

LOG_FORMATS = ("console", "json")


class TeeStream:
    """Minimal text stream that forwards every write to each wrapped stream."""

    def __init__(self, streams: list[TextIO]) -> None:
        self._streams = streams

    def write(self, text: str) -> int:
        for stream in self._streams:
            stream.write(text)
        return len(text)

    def flush(self) -> None:
        for stream in self._streams:
            stream.flush()


def level_for(debug: bool) -> int:
    return logging.DEBUG if debug else logging.INFO


def build_logger(
    level: int, log_format: str, stream: TextIO, colors: bool = True
) -> FilteringBoundLogger:
    """
    Return a bound logger writing rendered lines to stream, filtered at level.

    The logger is handed to each observer explicitly; nothing here touches
    structlog's global configuration.

    Raises:
        ValueError: if log_format is not one of LOG_FORMATS.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(
            colors=colors
        )
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        raise ValueError(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'."
        )

    return structlog.wrap_logger(
        structlog.PrintLogger(file=stream),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
    )
