"""Port interfaces for the logger and its collaborators.

This module defines the protocols that implementations must satisfy so
callers can depend on them without importing the concrete classes.
"""

from .services import Listener, ListenerRegistryPort, LoggerPort

__all__ = ["Listener", "ListenerRegistryPort", "LoggerPort"]
