from collections.abc import Callable, Mapping
from typing import Any, Protocol, Self, TypeAlias, runtime_checkable

from ...domain.entities.log_options import LogOptions

Listener: TypeAlias = Callable[[Any], object]
CallOptions: TypeAlias = LogOptions | Mapping[str, object] | None


@runtime_checkable
class ListenerRegistryPort(Protocol):
    pass

    def add(self, event: str, callback: Listener) -> None: ...

    def emit(self, event: str, payload: object) -> bool: ...

    def listeners(self, event: str) -> list[Listener]: ...

    def listener_count(self, event: str) -> int: ...


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def log(
        self, data: object, /, options: CallOptions = None, **overrides: object
    ) -> Self: ...

    def warn(
        self, data: object, /, options: CallOptions = None, **overrides: object
    ) -> Self: ...

    def error(
        self, data: object, /, options: CallOptions = None, **overrides: object
    ) -> Self: ...

    def info(
        self, data: object, /, options: CallOptions = None, **overrides: object
    ) -> Self: ...

    def success(
        self, data: object, /, options: CallOptions = None, **overrides: object
    ) -> Self: ...

    def set_levels(self, levels: object) -> Self: ...

    def remove_level(self, level: str) -> Self: ...

    def set_callback(self, event: str, callback: Listener | None = None) -> Self: ...

    def on(self, event: str, callback: Listener) -> Self: ...

    def emit(self, event: str, payload: object) -> bool: ...
