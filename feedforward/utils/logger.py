"""Structured logging with loguru.

Library modules log through ``from loguru import logger`` and never touch
sinks.  Applications (the CLI, the example scripts) call
:func:`setup_logging` once to choose where records go.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger as _loguru_logger

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level:<8}</level> | "
    "<cyan>{name}</cyan> — <level>{message}</level>"
)
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {name}:{function}:{line} — {message}"


def setup_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    """Replace loguru's default sink with the project's console format.

    Args:
        level: Minimum level for the stderr sink.
        log_file: Optional path of a rotating DEBUG-level log file.
    """
    _loguru_logger.remove()
    _loguru_logger.add(
        sys.stderr,
        level=level.upper(),
        format=_CONSOLE_FORMAT,
        colorize=True,
    )
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _loguru_logger.add(
            log_file,
            rotation="10 MB",
            retention="30 days",
            level="DEBUG",
            format=_FILE_FORMAT,
        )
