"""ProLogger package.

A small console logger for applications and scripts: leveled, timestamped
and colorized lines on stdout/stderr, an optional allow-list of named
levels, and listeners notified with every emitted line.

Usage:
    >>> from prologger import logger
    >>> logger.set_levels(["db"])
    >>> logger.log("message")
    >>> logger.warn("query slow", level="db")
    >>> logger.error(ValueError("boom"))
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("prologger")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from prologger.config import ConfigLoader, LoggerConfig
from prologger.domain.entities.log_options import LogOptions
from prologger.domain.entities.severity import Severity
from prologger.infrastructure.logging import (
    ConsoleLogger,
    create_logger,
    get_logger,
    set_logger,
)

__all__ = [
    "__version__",
    # Logger
    "ConsoleLogger",
    "LogOptions",
    "Severity",
    "logger",
    "create_logger",
    "get_logger",
    "set_logger",
    # Configuration
    "ConfigLoader",
    "LoggerConfig",
]


def __getattr__(name: str) -> ConsoleLogger:
    if name == "logger":
        return get_logger()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
