"""Diagnostic logging.

User-facing status lines are printed by the CLI; this logger is for
diagnostics (commands run, rollbacks) and goes to stderr through Rich.
Credentials are never logged: authorities are masked before they reach a
log call.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "autoproxy"


def configure_logging(level: str = "WARNING") -> None:
    """Attach a single RichHandler to the `autoproxy` logger."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Re-running the CLI in one process must not stack handlers.
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
