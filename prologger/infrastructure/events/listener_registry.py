from collections import defaultdict
from typing import override

from ...application.ports.services import Listener, ListenerRegistryPort


class ListenerRegistry(ListenerRegistryPort):
    """Event name to ordered listeners.

    Listeners run synchronously, in registration order, on the emitting
    thread. An exception raised by a listener propagates to the emitter and
    the remaining listeners for that event are not called.
    """

    def __init__(self) -> None:
        super().__init__()
        self._listeners: defaultdict[str, list[Listener]] = defaultdict(list)

    @override
    def add(self, event: str, callback: Listener) -> None:
        if not callable(callback):
            raise TypeError(f"listener for {event!r} must be callable")
        self._listeners[event].append(callback)

    @override
    def emit(self, event: str, payload: object) -> bool:
        # Snapshot: a listener registering another one must not extend this dispatch
        callbacks = list(self._listeners.get(event, ()))
        for callback in callbacks:
            callback(payload)
        return bool(callbacks)

    @override
    def listeners(self, event: str) -> list[Listener]:
        return list(self._listeners.get(event, ()))

    @override
    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))
