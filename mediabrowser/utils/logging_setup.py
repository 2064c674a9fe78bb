"""Root logger setup: console on stdout plus an optional rotating log file."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from mediabrowser.config import LoggingConfig

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the root logger, replacing any handlers it already has.

    Args:
        level: Level name; unknown names fall back to INFO
        log_file: Rotating log file, created with its directory. None disables
            file logging.
        console: Also log to stdout
        max_bytes: Size at which the log file rotates
        backup_count: Rotated files to keep
        log_format: Format of the file handler

    Returns:
        The root logger
    """
    numeric_level = _resolve_level(level)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(numeric_level)

    if console:
        root_logger.addHandler(_console_handler(numeric_level))

    if log_file:
        root_logger.addHandler(
            _file_handler(Path(log_file), numeric_level, max_bytes, backup_count, log_format)
        )

    root_logger.debug("Logging configured: level=%s file=%s", level, log_file or "-")
    return root_logger


def setup_logging_from_config(logging_config: LoggingConfig) -> logging.Logger:
    """Configure logging from the ``logging`` config section."""
    return setup_logging(
        level=logging_config.level,
        log_file=logging_config.file if logging_config.to_file else None,
        console=logging_config.console,
        max_bytes=logging_config.max_bytes,
        backup_count=logging_config.backup_count,
        log_format=logging_config.format,
    )


def _resolve_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    return handler


def _file_handler(
    path: Path,
    level: int,
    max_bytes: int,
    backup_count: int,
    log_format: str,
) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler
