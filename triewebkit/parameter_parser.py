"""Conversion and validation of route parameter values."""

from __future__ import annotations

import math
import re
from typing import Any

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_int(value: str) -> int:
    match = _INT_PREFIX.match(value)
    if match is None:
        raise ValueError(f"invalid integer: {value!r}")
    number = int(match.group())
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"integer out of range: {value!r}")
    return number


def _parse_float(value: str) -> float:
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        raise ValueError(f"invalid number: {value!r}")
    text = match.group()
    number = float(text)
    if math.isinf(number) and "inf" not in text.lower():
        raise OverflowError(f"number out of range: {value!r}")
    return number


def parse(value: str, kind: type) -> Any:
    """Convert a parameter string to ``int``, ``float`` or ``str``.

    Numbers are read from the leading part of the string; trailing text is
    ignored, and a string without a leading number raises ``ValueError``.
    """
    if kind is int:
        return _parse_int(value)
    if kind is float:
        return _parse_float(value)
    if kind is str:
        return value
    raise TypeError(f"unsupported parameter type: {kind!r}")


def validate(value: str, pattern: str) -> bool:
    """Return whether the whole value matches the regular expression."""
    return re.fullmatch(pattern, value) is not None