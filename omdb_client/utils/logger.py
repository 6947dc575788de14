"""Logging configuration with console and optional file handlers.

Library modules only call ``logging.getLogger(__name__)``;
applications that want output call ``setup_logger()`` once.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from omdb_client.settings import settings

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOG_DATE_FORMAT = "%H:%M:%S"
_LOGGERS_CACHE: dict[str, logging.Logger] = {}


def setup_logger(
    name: str = "omdb_client",
    level: int | None = None,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Configure and return a logger with console and file handlers.

    Args:
        name: Logger name (default: the package logger).
        level: Logging level. If None, uses LOG_LEVEL.
        log_dir: Directory for log files. If None, uses LOG_DIR;
            no file handler when neither is set.

    Returns:
        Configured logger instance.
    """
    if name in _LOGGERS_CACHE:
        return _LOGGERS_CACHE[name]

    if level is None:
        level = logging.getLevelName(settings.logging.level)
    if log_dir is None:
        log_dir = settings.logging.log_dir

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(_LOG_FORMAT, _LOG_DATE_FORMAT)

    console_handler = _create_console_handler(formatter, level)
    logger.addHandler(console_handler)

    if log_dir is not None:
        file_handler = _create_file_handler(name, formatter, level, log_dir)
        if file_handler:
            logger.addHandler(file_handler)

    _LOGGERS_CACHE[name] = logger
    return logger


def _create_console_handler(
    formatter: logging.Formatter,
    level: int,
) -> logging.StreamHandler:
    """Create console stream handler (stderr)."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _create_file_handler(
    name: str,
    formatter: logging.Formatter,
    level: int,
    log_dir: Path,
) -> logging.FileHandler | None:
    """Create file handler with a dated filename.

    Args:
        name: Logger name for filename.
        formatter: Log formatter.
        level: Logging level.
        log_dir: Directory for log files.

    Returns:
        Configured FileHandler or None on failure.
    """
    try:
        log_path = _get_log_file_path(name, log_dir)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setLevel(level)
        handler.setFormatter(formatter)
        return handler
    except OSError as e:
        print(f"Warning: Could not create log file: {e}", file=sys.stderr)
        return None


def _get_log_file_path(name: str, log_dir: Path) -> Path:
    """Build log file path with date suffix."""
    log_dir.mkdir(parents=True, exist_ok=True)

    safe_name = name.replace(".", "_").replace("/", "_")
    date_suffix = datetime.now().strftime("%Y%m%d")
    filename = f"{safe_name}_{date_suffix}.log"

    return log_dir / filename
