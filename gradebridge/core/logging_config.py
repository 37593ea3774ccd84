"""
Logging configuration for gradebridge.
Implements console logging plus optional rotating file logs with 10 MB max size.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from gradebridge.core.config import settings

# Log file settings
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5  # Keep 5 backup files

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_file_handler(
    filename: str,
    level: int = logging.DEBUG,
    log_dir: str | Path | None = None,
) -> RotatingFileHandler:
    """Create a rotating file handler."""
    directory = Path(log_dir or settings.log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        directory / filename,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    return handler


def get_console_handler(level: int = logging.INFO) -> logging.StreamHandler:
    """Create a console handler."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    return handler


def resolve_log_level(log_level: str = "", environment: str = "development") -> int:
    """Map a level name to a logging constant, defaulting by environment."""
    if not log_level:
        log_level = "WARNING" if environment == "production" else "DEBUG"
    return getattr(logging, log_level.upper(), logging.INFO)


def setup_logging(
    app_name: str | None = None,
    log_level: str | None = None,
    environment: str | None = None,
    enable_console: bool = True,
    enable_file: bool | None = None,
    log_dir: str | Path | None = None,
) -> logging.Logger:
    """
    Configure logging for the application.

    Unset arguments fall back to the values in ``settings``.

    Args:
        app_name: Name of the application (used for log file naming)
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
                   If empty, auto-determines based on environment
        environment: Application environment (development, production)
        enable_console: Whether to log to console
        enable_file: Whether to log to rotating files
        log_dir: Directory for log files

    Returns:
        Configured root logger
    """
    app_name = app_name or settings.app_name
    environment = environment or settings.environment
    if log_level is None:
        log_level = settings.log_level
    if enable_file is None:
        enable_file = settings.log_to_file

    numeric_level = resolve_log_level(log_level, environment)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, handlers will filter
    root_logger.handlers.clear()

    if enable_console:
        root_logger.addHandler(get_console_handler(numeric_level))

    if enable_file:
        # Main application log
        root_logger.addHandler(get_file_handler(f"{app_name}.log", logging.DEBUG, log_dir))
        # Error-only log
        root_logger.addHandler(get_file_handler(f"{app_name}_error.log", logging.ERROR, log_dir))

    # Reduce noise from third-party libraries
    logging.getLogger("pydantic").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
