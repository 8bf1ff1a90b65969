"""
Utilities Module
================

Logging helpers.
"""

from .logger import setup_logging, get_logger, LoggingContext, with_debug_logging, with_quiet_logging

__all__ = [
    'setup_logging',
    'get_logger',
    'LoggingContext',
    'with_debug_logging',
    'with_quiet_logging',
]
