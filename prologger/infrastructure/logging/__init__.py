"""Logging infrastructure.

This module provides the console logger and the shared default instance.
"""

from .console_logger import ConsoleLogger
from .shared import create_logger, get_logger, set_logger

__all__ = [
    "ConsoleLogger",
    "create_logger",
    "get_logger",
    "set_logger",
]
