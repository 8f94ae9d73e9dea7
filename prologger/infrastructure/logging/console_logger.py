from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Self, override

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style
from rich.traceback import Traceback

from ...application.ports.services import CallOptions, Listener, LoggerPort
from ...constants import Defaults
from ...domain.entities.log_options import LogOptions
from ...domain.entities.severity import Severity
from ...domain.services.payload_converter import PayloadConverter
from ..events.listener_registry import ListenerRegistry
from ..formatting.date_mask import format_date

if TYPE_CHECKING:
    from ...config import LoggerConfig


def _noop(_payload: object) -> None:
    return None


class ConsoleLogger(LoggerPort):
    """Leveled, timestamped and colorized console output.

    ``log``, ``info`` and ``success`` write to ``console`` (stdout by
    default); ``warn`` and ``error`` write to ``error_console`` (stderr).
    Every emitted line is also handed to the listeners registered for the
    severity's event name.

    A call carrying ``level`` is dropped unless that level was allowed with
    :meth:`set_levels`. Calls without a level are never filtered.

    Example:
        >>> logger = ConsoleLogger()
        >>> logger.set_levels(["net"]).log("connected", level="net")
        >>> logger.warn({"retry": 3}, noconvert=True)
    """

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
        levels: Sequence[str] = (),
        noprefix: bool = False,
        dateformat: str = Defaults.DATEFORMAT,
    ) -> None:
        super().__init__()
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self._levels: list[str] = list(levels)
        self._noprefix = bool(noprefix)
        self._dateformat = str(dateformat)
        self._listeners = ListenerRegistry()
        self._converter = PayloadConverter(
            render_date=format_date,
            clock=clock or datetime.now,
            on_exception=self._print_traceback,
        )
        # Keeps an "error" event with no subscriber from going unheard
        self._listeners.add(Severity.ERROR, _noop)

    @classmethod
    def from_config(
        cls,
        config: LoggerConfig,
        console: Console | None = None,
        error_console: Console | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> Self:
        return cls(
            console,
            error_console,
            clock=clock,
            levels=config.levels,
            noprefix=config.noprefix,
            dateformat=config.dateformat,
        )

    @property
    def noprefix(self) -> bool:
        """Omit the ``[LOG]:``-style tag unless a call asks for it."""
        return self._noprefix

    @noprefix.setter
    def noprefix(self, value: object) -> None:
        self._noprefix = bool(value)

    @property
    def dateformat(self) -> str:
        """Date mask used for the timestamp of converted payloads."""
        return self._dateformat

    @dateformat.setter
    def dateformat(self, value: object) -> None:
        self._dateformat = str(value)

    @property
    def levels(self) -> list[str]:
        return list(self._levels)

    @override
    def log(
        self, data: object, /, options: CallOptions = None, **overrides: object
    ) -> Self:
        return self._emit(Severity.LOG, data, options, overrides)

    @override
    def warn(
        self, data: object, /, options: CallOptions = None, **overrides: object
    ) -> Self:
        return self._emit(Severity.WARN, data, options, overrides)

    @override
    def error(
        self, data: object, /, options: CallOptions = None, **overrides: object
    ) -> Self:
        return self._emit(Severity.ERROR, data, options, overrides)

    @override
    def info(
        self, data: object, /, options: CallOptions = None, **overrides: object
    ) -> Self:
        return self._emit(Severity.INFO, data, options, overrides)

    @override
    def success(
        self, data: object, /, options: CallOptions = None, **overrides: object
    ) -> Self:
        return self._emit(Severity.SUCCESS, data, options, overrides)

    @override
    def set_levels(self, levels: object) -> Self:
        """Replace the allowed levels (list or tuple) or add one (str)."""
        if isinstance(levels, str):
            self._levels.append(levels)
        elif isinstance(levels, (list, tuple)):
            self._levels = [str(level) for level in levels]
        else:
            self.log(TypeError("Levels must be a list or str"))
        return self

    @override
    def remove_level(self, level: str) -> Self:
        if level in self._levels:
            self._levels.remove(level)
        return self

    @override
    def set_callback(self, event: str, callback: Listener | None = None) -> Self:
        return self.on(event, callback or _noop)

    @override
    def on(self, event: str, callback: Listener) -> Self:
        if not callable(callback):
            self.log(TypeError(f"Callback for {event!r} must be callable"))
            return self
        self._listeners.add(str(event), callback)
        return self

    @override
    def emit(self, event: str, payload: object) -> bool:
        return self._listeners.emit(str(event), payload)

    def listener_count(self, event: str) -> int:
        return self._listeners.listener_count(str(event))

    def _emit(
        self,
        severity: Severity,
        data: object,
        options: object,
        overrides: Mapping[str, object],
    ) -> Self:
        unknown = _unknown_option_keys(options, overrides)
        if unknown:
            self.log(TypeError(f"Unknown log options: {', '.join(unknown)}"))
            return self
        out = data
        resolved = _resolve_options(options, overrides)
        if resolved is not None:
            if resolved.level and resolved.level not in self._levels:
                return self
            if not resolved.noconvert:
                out = self._converter.convert(data, self._dateformat)
            if not self._noprefix or resolved.prefix:
                out = f"{severity.tag}: {out}"
        target = self.error_console if severity.stderr else self.console
        self._write(target, severity, str(out))
        self._listeners.emit(severity, out)
        return self

    def _write(self, target: Console, severity: Severity, line: str) -> None:
        # Bypasses rich rendering so tabs and control characters are kept
        color_system = COLOR_SYSTEMS.get(target.color_system or "")
        if color_system is not None and not target.no_color:
            style = Style(color=severity.color)
            line = style.render(line, color_system=color_system)
        target.file.write(f"{line}\n")
        target.file.flush()

    def _print_traceback(self, exc: BaseException) -> None:
        self.error_console.print(
            Traceback.from_exception(type(exc), exc, exc.__traceback__)
        )


def _unknown_option_keys(
    options: object, overrides: Mapping[str, object]
) -> list[str]:
    keys = list(overrides)
    if isinstance(options, Mapping):
        keys.extend(str(key) for key in options)
    return sorted({key for key in keys if key not in LogOptions.NAMES})


def _resolve_options(
    options: object, overrides: Mapping[str, object]
) -> LogOptions | None:
    """Normalize the second argument of an emit call.

    Returns ``None`` for a non-record argument (``0``, ``False``, ``""``...),
    which sends the payload out untouched: no filter, no convert, no tag.
    """
    if options is None:
        return LogOptions().merged(**overrides)
    if isinstance(options, LogOptions):
        return options.merged(**overrides)
    if isinstance(options, Mapping):
        return LogOptions.from_mapping(options).merged(**overrides)
    return None
