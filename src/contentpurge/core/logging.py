"""Logging setup for the command line.

Library modules only create loggers (``logging.getLogger(__name__)``); the CLI
calls :func:`configure_logging` once to decide where records go.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(
    level: str | int = "INFO",
    fmt: str = "console",
    console: Console | None = None,
) -> None:
    """Install a root handler for contentpurge output.

    Args:
        level: Logging level name or number.
        fmt: ``console`` for a Rich handler, ``plain`` for timestamped lines
            (CI logs, redirected output).
        console: Rich console to share with the progress display, so log
            lines render above the live progress bar.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if fmt == "plain":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    else:
        handler = RichHandler(
            console=console,
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(level=level, handlers=[handler], force=True)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
