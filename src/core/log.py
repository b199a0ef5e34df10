"""Logging setup.

Logs go to stderr through Rich so they never interleave with the listing
output printed on stdout (useful when redirecting results to a file).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "rescue-dogs"


def get_logger(name: str) -> logging.Logger:
    """Return a logger instance with a consistent format."""
    return logging.getLogger(name)


def configure_logging(level: str | int = "WARNING") -> None:
    """Install (once) a Rich stderr handler on the root logger."""

    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        log_time_format="%Y-%m-%dT%H:%M:%S",
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
