"""Logging configuration for the oho CLI.

Everything goes to stderr: stdout is reserved for command output and, under
``oho mcpserver``, for the JSON-RPC stream.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "OHO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging(level: str | None = None, *, verbose: bool = False) -> None:
    """Install a stderr :class:`RichHandler` on the root logger.

    Args:
        level: Level name override. Falls back to ``OHO_LOG_LEVEL``, then WARNING.
        verbose: Force DEBUG regardless of *level*.
    """
    level_name = "DEBUG" if verbose else (level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))
    log_level = getattr(logging, level_name.upper(), logging.WARNING)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=log_level == logging.DEBUG,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=log_level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

    # Quiet noisy third-party libraries
    logging.getLogger("httpx").setLevel(max(log_level, logging.INFO))
    logging.getLogger("httpcore").setLevel(max(log_level, logging.WARNING))
