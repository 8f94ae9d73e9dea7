"""Date mask formatter.

Renders a ``datetime`` against a mask such as ``yyyy/mm/dd H:MM:ss.l``.

Supported tokens:
- ``d`` / ``dd``: day of month, ``ddd`` / ``dddd``: weekday name
- ``m`` / ``mm``: month number, ``mmm`` / ``mmmm``: month name
- ``yy`` / ``yyyy``: year
- ``H`` / ``HH``: hour (0-23), ``h`` / ``hh``: hour (1-12)
- ``M`` / ``MM``: minutes, ``s`` / ``ss``: seconds
- ``l``: milliseconds (3 digits), ``L``: centiseconds (2 digits)
- ``t`` / ``tt`` / ``T`` / ``TT``: a / am / A / AM
- ``o``: UTC offset (+0100), ``p``: UTC offset (+01:00)
- ``S``: ordinal suffix of the day (st, nd, rd, th)
- ``Z``: timezone name

Quoted text (single or double quotes) is copied without its quotes.
"""

from __future__ import annotations

from datetime import datetime, timedelta
import re

_TOKEN = re.compile(
    r"d{1,4}|m{1,4}|yy(?:yy)?|([HhMsTt])\1?|[LlopSZ]|\"[^\"]*\"|'[^']*'"
)

_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_date(value: datetime, mask: str) -> str:
    """Render ``value`` against ``mask``.

    Naive datetimes are treated as local time.

    Args:
        value: Moment to render
        mask: Mask made of the tokens listed in the module docstring

    Returns:
        The rendered string
    """
    local = value if value.tzinfo is not None else value.astimezone()

    def _render(match: re.Match[str]) -> str:
        token = match.group(0)
        if token[0] in "\"'":
            return token[1:-1]
        return _render_token(local, token)

    return _TOKEN.sub(_render, mask)


def _render_token(value: datetime, token: str) -> str:
    hour12 = value.hour % 12 or 12
    match token:
        case "d":
            return str(value.day)
        case "dd":
            return f"{value.day:02d}"
        case "ddd":
            return _DAY_NAMES[value.weekday()][:3]
        case "dddd":
            return _DAY_NAMES[value.weekday()]
        case "m":
            return str(value.month)
        case "mm":
            return f"{value.month:02d}"
        case "mmm":
            return _MONTH_NAMES[value.month - 1][:3]
        case "mmmm":
            return _MONTH_NAMES[value.month - 1]
        case "yy":
            return f"{value.year % 100:02d}"
        case "yyyy":
            return f"{value.year:04d}"
        case "H":
            return str(value.hour)
        case "HH":
            return f"{value.hour:02d}"
        case "h":
            return str(hour12)
        case "hh":
            return f"{hour12:02d}"
        case "M":
            return str(value.minute)
        case "MM":
            return f"{value.minute:02d}"
        case "s":
            return str(value.second)
        case "ss":
            return f"{value.second:02d}"
        case "l":
            return f"{value.microsecond // 1000:03d}"
        case "L":
            return f"{value.microsecond // 10000:02d}"
        case "t":
            return "a" if value.hour < 12 else "p"
        case "tt":
            return "am" if value.hour < 12 else "pm"
        case "T":
            return "A" if value.hour < 12 else "P"
        case "TT":
            return "AM" if value.hour < 12 else "PM"
        case "o":
            return _offset(value, separator="")
        case "p":
            return _offset(value, separator=":")
        case "S":
            return _ordinal_suffix(value.day)
        case "Z":
            return value.tzname() or ""
    return token


def _offset(value: datetime, *, separator: str) -> str:
    offset = value.utcoffset() or timedelta(0)
    total_minutes = int(offset.total_seconds() // 60)
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _ordinal_suffix(day: int) -> str:
    if 10 <= day % 100 <= 20:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
