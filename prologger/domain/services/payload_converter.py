"""Payload conversion for emit operations.

Turns whatever a caller hands to ``log``/``warn``/... into the final text:
exceptions are reduced to their message, structured values are serialized
to JSON when possible, and a timestamp rendered from the active date mask is
prepended.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
import json

_SCALARS = (str, int, float, bool)


def stringify(value: object) -> object:
    """Serialize a structured value to JSON.

    Scalars are returned untouched; ``None`` becomes ``null``. A value
    ``json`` cannot encode (unsupported type, circular reference) is
    returned untouched.
    """
    if isinstance(value, _SCALARS):
        return value
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return value


@dataclass(slots=True)
class PayloadConverter:
    """Convert step shared by every emit operation.

    Attributes:
        render_date: Renders a moment against a date mask.
        clock: Returns the moment used for the timestamp.
        on_exception: Receives exception payloads so their traceback can be
            written to a diagnostic stream.
    """

    render_date: Callable[[datetime, str], str]
    clock: Callable[[], datetime] = field(default=datetime.now)
    on_exception: Callable[[BaseException], None] | None = None

    def convert(self, data: object, dateformat: str) -> str:
        out = data
        if isinstance(data, BaseException):
            out = str(data)
            if self.on_exception is not None:
                self.on_exception(data)
        return self.timestamp(stringify(out), dateformat)

    def timestamp(self, data: object, dateformat: str) -> str:
        return f"[{self.render_date(self.clock(), dateformat)}] {data}"
