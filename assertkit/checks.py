"""General value checks: lists, strings, timestamps, booleans and maps."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from numbers import Number

from assertkit.numeric import to_number

__all__ = [
    "contains",
    "is_empty",
    "ends_with",
    "parse_rfc3339",
    "is_expired",
    "is_false",
    "has_key",
]

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d{1,9}))?"
    r"(Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def _format_number(number: Decimal) -> str:
    if not number.is_finite():
        raise ValueError(f"number must be finite: {number!r}")
    if number == 0:
        return "0"
    return format(number.normalize(), "f")


def _as_string(value: object) -> str:
    """Convert a string, boolean or number to its canonical string form."""
    if value is None:
        raise TypeError("argument must not be null")
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_number(Decimal(repr(value)))
    if isinstance(value, Number):
        return _format_number(to_number(value))
    raise TypeError("string required")


def contains(items: Iterable[object], element: object) -> bool:
    """Return whether ``element`` is among ``items``, compared as strings."""
    if items is None:
        raise TypeError("argument must not be null")
    if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Iterable):
        raise TypeError("list required")
    target = _as_string(element)
    return any(_as_string(item) == target for item in items)


def is_empty(s: object) -> bool:
    """Return whether the string ``s`` has zero length."""
    return len(_as_string(s)) == 0


def ends_with(suffix: object, string: object) -> bool:
    """Return whether ``string`` ends with ``suffix``."""
    return _as_string(string).endswith(_as_string(suffix))


def parse_rfc3339(timestamp: str) -> datetime:
    """Parse an RFC 3339 timestamp into a timezone-aware ``datetime``.

    Raises ``ValueError`` when the text is not a valid timestamp.
    """
    if not isinstance(timestamp, str):
        raise TypeError("string required")
    match = _RFC3339.fullmatch(timestamp)
    if match is None:
        raise ValueError(f"cannot parse {timestamp!r} as RFC 3339")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        zone_hours, zone_minutes = int(zone[1:3]), int(zone[4:6])
        if zone_hours >= 24 or zone_minutes >= 60:
            raise ValueError(f"time zone offset out of range in {timestamp!r}")
        tz = timezone(sign * timedelta(hours=zone_hours, minutes=zone_minutes))
    microsecond = int((fraction or "").ljust(6, "0")[:6])
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        microsecond,
        tzinfo=tz,
    )


def is_expired(timestamp: str) -> bool:
    """Return whether an RFC 3339 timestamp lies in the past.

    A timestamp that cannot be parsed counts as not expired.
    """
    try:
        moment = parse_rfc3339(timestamp)
    except ValueError:
        return False
    return moment < datetime.now(timezone.utc)


def is_false(value: object) -> bool:
    """Return whether the boolean ``value`` is false."""
    if value is None:
        raise TypeError("argument must not be null")
    if isinstance(value, bool):
        return not value
    if isinstance(value, str):
        if value == "true":
            return False
        if value == "false":
            return True
        raise ValueError(f"a bool is required, not {value!r}")
    raise TypeError("bool required")


def has_key(key: object, mapping: Mapping[object, object] | None) -> bool:
    """Return whether ``key`` is one of the keys of ``mapping``.

    Keys are compared by their string form; a missing mapping has no keys.
    """
    wanted = _as_string(key)
    if mapping is None:
        return False
    if not isinstance(mapping, Mapping):
        raise TypeError("map required")
    return any(_as_string(existing) == wanted for existing in mapping)