from .listener_registry import ListenerRegistry

__all__ = ["ListenerRegistry"]
