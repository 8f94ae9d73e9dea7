from enum import StrEnum


class Severity(StrEnum):
    """Emit operation of the logger.

    The value doubles as the event name listeners subscribe to.
    """

    LOG = "log"
    WARN = "warn"
    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"

    @property
    def tag(self) -> str:
        return f"[{self.name}]"

    @property
    def color(self) -> str:
        return _COLORS[self]

    @property
    def stderr(self) -> bool:
        return self in (Severity.WARN, Severity.ERROR)


_COLORS: dict[Severity, str] = {
    Severity.LOG: "cyan",
    Severity.WARN: "yellow",
    Severity.ERROR: "red",
    Severity.INFO: "blue",
    Severity.SUCCESS: "green",
}
