"""
Logging Utilities
=================

Centralized logging configuration for quickconfig applications.

The library modules only create module-level loggers; handlers are
installed here, by the application or the command-line front end.
"""

import logging
import logging.handlers
import os
import sys
from typing import Any, Optional

APP_LOGGER_NAME = "quickconfig"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    config: Optional[Any] = None,
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    max_file_size: str = "10MB",
    backup_count: int = 5
) -> logging.Logger:
    """
    Set up centralized logging configuration.

    Args:
        config: Mapping (or DictConfig) with an optional ``logging`` section
            holding ``level``, ``file``, ``max_file_size`` and ``backup_count``
        log_level: Logging level
        log_file: Log file path
        max_file_size: Maximum log file size before rotation (e.g. '10MB')
        backup_count: Number of rotated files to keep

    Returns:
        The quickconfig application logger
    """
    if config is not None:
        logging_config = config.get('logging')
        if not isinstance(logging_config, dict):
            logging_config = {}
        log_level = logging_config.get('level', log_level)
        log_file = logging_config.get('file', log_file)
        max_file_size = logging_config.get('max_file_size', max_file_size)
        backup_count = logging_config.get('backup_count', backup_count)

    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=_parse_size(max_file_size),
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.debug(f"Logging initialized - Level: {log_level}, File: {log_file}")

    return app_logger


def _parse_size(size_str: str) -> int:
    """
    Parse size string to bytes.

    Args:
        size_str: Size string (e.g., '10MB', '1GB', '2048')

    Returns:
        Size in bytes
    """
    size_str = str(size_str).upper().strip()

    if size_str.endswith('KB'):
        return int(float(size_str[:-2]) * 1024)
    elif size_str.endswith('MB'):
        return int(float(size_str[:-2]) * 1024 * 1024)
    elif size_str.endswith('GB'):
        return int(float(size_str[:-2]) * 1024 * 1024 * 1024)
    else:
        # Assume bytes
        return int(size_str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)


class LoggingContext:
    """
    Context manager for temporary logging configuration.
    """

    def __init__(self, logger: logging.Logger, level: int):
        self.logger = logger
        self.new_level = level
        self.old_level = logger.level

    def __enter__(self):
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.old_level)


def with_debug_logging(logger: logging.Logger) -> LoggingContext:
    """Temporarily lower ``logger`` to DEBUG."""
    return LoggingContext(logger, logging.DEBUG)


def with_quiet_logging(logger: logging.Logger) -> LoggingContext:
    """Temporarily raise ``logger`` to WARNING."""
    return LoggingContext(logger, logging.WARNING)
