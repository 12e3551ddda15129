"""Parsing of Go-style duration strings such as ``1h30m`` or ``-1.5s``."""

import re
from datetime import timedelta
from decimal import Decimal

# Unit -> microseconds
_UNITS: dict[str, Decimal] = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),  # micro sign
    "μs": Decimal(1),  # greek mu
    "ms": Decimal(1000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}

_GROUP = re.compile(r"(\d+\.?\d*|\.\d+)([^\d.]+)")

# Largest magnitude representable as int64 nanoseconds
_MAX_NANOSECONDS = 2**63 - 1


def parse_duration(text: str) -> timedelta:
    """Parse a duration: optional sign followed by ``<number><unit>`` groups.

    Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and ``h``.
    A bare ``0`` is accepted. Precision below one microsecond is truncated.
    Durations beyond about 2562047h (int64 nanoseconds) are out of range.

    Raises:
        ValueError: If the text is not a valid duration
    """
    original = text
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]

    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration {original!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(text):
        match = _GROUP.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration {original!r}")
        number, unit = match.groups()
        if unit not in _UNITS:
            raise ValueError(f"unknown unit {unit!r} in duration {original!r}")
        total += Decimal(number) * _UNITS[unit]
        pos = match.end()

    if total * 1000 > _MAX_NANOSECONDS:
        raise ValueError(f"invalid duration {original!r}: out of range")

    return timedelta(microseconds=sign * int(total))
