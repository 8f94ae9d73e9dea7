"""Process-wide default logger.

``prologger.logger`` resolves to the instance held here. It is built at
import time with no level restriction and default formatting. Applications
may swap it once at start-up (for example after loading a config file);
code that needs isolation, such as tests, builds its own ``ConsoleLogger``.
"""

from __future__ import annotations

from rich.console import Console

from ...config import LoggerConfig
from .console_logger import ConsoleLogger

__all__ = ["create_logger", "get_logger", "set_logger"]


_logger: ConsoleLogger = ConsoleLogger()


def get_logger() -> ConsoleLogger:
    """Get the shared logger instance.

    Returns:
        The shared ConsoleLogger
    """
    return _logger


def set_logger(logger: ConsoleLogger) -> None:
    """Set the shared logger instance.

    Args:
        logger: Logger instance to use process-wide
    """
    global _logger
    _logger = logger


def create_logger(
    config: LoggerConfig | None = None,
    console: Console | None = None,
    error_console: Console | None = None,
) -> ConsoleLogger:
    """Create a logger from ``config`` and make it the shared instance.

    Args:
        config: Configuration to apply (defaults when omitted)
        console: Rich console for stdout output
        error_console: Rich console for stderr output

    Returns:
        The new logger instance
    """
    logger = ConsoleLogger.from_config(
        config or LoggerConfig(), console, error_console
    )
    set_logger(logger)
    return logger
