from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class LogOptions:
    """Per-call options of an emit operation.

    Attributes:
        level: Named level the call belongs to. When set and not in the
            logger's allow-list the call is dropped.
        noconvert: Skip the convert step (no stringify, no timestamp).
        prefix: Force the severity tag even when the logger has ``noprefix``.
    """

    NAMES: ClassVar[frozenset[str]] = frozenset({"level", "noconvert", "prefix"})

    level: str | None = None
    noconvert: bool = False
    prefix: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, object]) -> LogOptions:
        raw = {key: value for key, value in options.items() if key in cls.NAMES}
        level = raw.get("level")
        return cls(
            level=str(level) if level else None,
            noconvert=bool(raw.get("noconvert", False)),
            prefix=bool(raw.get("prefix", False)),
        )

    def merged(self, **overrides: object) -> LogOptions:
        if not overrides:
            return self
        return LogOptions.from_mapping({**asdict(self), **overrides})
