"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the ``tagtidy`` logger: a Rich console handler, plus a rotating file when asked.
Why: The CLI reconfigures verbosity and file output after parsing; import stays side-effect free.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from tagtidy.config.paths import default_log_file

from .handlers import PathRichHandler


LOGGER_NAME: Final[str] = "tagtidy"
DEFAULT_LOG_FILE: Final[Path] = default_log_file()

_LOG_FILE_MAX_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_FILE_BACKUPS: Final[int] = 5
_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _file_handler(log_file: Path) -> RotatingFileHandler:
    resolved = Path(log_file).expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        resolved,
        maxBytes=_LOG_FILE_MAX_BYTES,
        backupCount=_LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    # The file always carries the full trace, whatever the console shows.
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    console: Console | None = None,
) -> logging.Logger:
    """(Re)configure the application logger.

    Existing handlers are closed and replaced, so calling this again after
    argument parsing changes verbosity without duplicating output.

    Args:
        log_file: Rotating DEBUG log destination; console only when None.
        console_level: Level shown on the console.
        console: Console the Rich handler writes to; stderr when omitted.

    Returns:
        logging.Logger: The ``tagtidy`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = PathRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        logger.addHandler(_file_handler(log_file))

    return logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "setup_logger", "logger"]
