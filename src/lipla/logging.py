"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.logging import RichHandler

_data_file_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "lipla_data_file", default="-"
)


class _ContextFilter(logging.Filter):
    """Inject the active data file into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.data_file = _data_file_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def session_context(*, data_file: str) -> Any:
    """Temporarily bind the data file of an interpreter session for logging.

    Args:
        data_file: Path of the life plan being edited.
    """

    token = _data_file_var.set(data_file)
    try:
        yield
    finally:
        _data_file_var.reset(token)


def configure_logging(level: str = "WARNING") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="file=%(data_file)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level.upper())
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
