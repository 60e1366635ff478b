"""Helpers for turning dbench duration text into nanosecond counts."""

from __future__ import annotations

import math
import re
from typing import Dict

from ..models import MAX_DURATION_NS, MIN_DURATION_NS, NS_PER_MS

UNIT_NANOSECONDS: Dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": NS_PER_MS,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT_PATTERN = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]*)")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_duration(text: str) -> int:
    """Parse a duration literal such as ``"0.0092ms"`` or ``"1h30m"``.

    Each ``<number><unit>`` component contributes its integer part times the
    unit plus its fractional part times the unit, truncated to whole
    nanoseconds. The return value is the signed total in nanoseconds.
    """

    original = text
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return 0
    if not text:
        raise ValueError(f"invalid duration {original!r}")

    total = 0
    position = 0
    while position < len(text):
        match = _COMPONENT_PATTERN.match(text, position)
        integer_digits, fraction_digits, unit = match.groups()
        if not integer_digits and not fraction_digits:
            raise ValueError(f"invalid duration {original!r}")
        if not unit:
            raise ValueError(f"missing unit in duration {original!r}")
        scale = UNIT_NANOSECONDS.get(unit)
        if scale is None:
            raise ValueError(f"unknown unit {unit!r} in duration {original!r}")

        component = int(integer_digits or "0") * scale
        if fraction_digits:
            component += int(fraction_digits) * scale // 10 ** len(fraction_digits)
        total += component
        position = match.end()

    if negative:
        total = -total
    if not MIN_DURATION_NS <= total <= MAX_DURATION_NS:
        raise ValueError(f"invalid duration {original!r}: out of range")
    return total


def parse_implicit_milliseconds(text: str) -> int:
    """Convert a unit-less millisecond decimal such as ``"0.008"`` to nanoseconds.

    The value is multiplied as a float and truncated toward zero, so
    ``"0.00161196365508829"`` becomes ``1611``.
    """

    if not _DECIMAL_PATTERN.fullmatch(text):
        raise ValueError(f"could not parse as float: {text!r}")
    raw = float(text)
    nanoseconds = float(NS_PER_MS) * raw
    if not math.isfinite(nanoseconds):
        raise ValueError(f"could not parse duration from: {text!r}: out of range")
    truncated = int(nanoseconds)
    if not MIN_DURATION_NS <= truncated <= MAX_DURATION_NS:
        raise ValueError(f"could not parse duration from: {text!r}: out of range")
    return truncated
