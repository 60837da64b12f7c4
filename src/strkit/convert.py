"""
strkit - Conversions.

Number parsing and number-to-text formatting:
- Best-effort integer and float parsing
- Human readable byte sizes
- Fixed width binary strings
- English ordinals
"""

from __future__ import annotations

import re
from typing import Any, Tuple

import numpy as np

# =============================================================================
# Constants
# =============================================================================

SIZE_UNITS: Tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}

# Leading whitespace accepted by the parsers (C locale isspace)
_LEADING_SPACE = r"[ \t\n\v\f\r]*"
_INTEGER = r"[+-]?[0-9]+"
_FLOAT = (
    r"[+-]?(?:"
    r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan"
    r")"
)

_INTEGER_PREFIX = re.compile(_LEADING_SPACE + "(" + _INTEGER + ")")
_FLOAT_PREFIX = re.compile(_LEADING_SPACE + "(" + _FLOAT + ")", re.IGNORECASE)
_NUMBER = re.compile(_FLOAT, re.IGNORECASE)


# =============================================================================
# Parsing
# =============================================================================


def to_number(s: str) -> int:
    """
    Parse the integer at the start of s.

    Leading whitespace and a sign are accepted, anything after the digits
    is ignored. Returns 0 when s does not start with a number.

    Example:
        to_number("  42abc") -> 42
    """
    match = _INTEGER_PREFIX.match(s)
    return int(match.group(1)) if match else 0


def to_double(s: str) -> float:
    """Parse the float at the start of s; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(s)
    return float(match.group(1)) if match else 0.0


def is_number(s: str) -> bool:
    """Check if the whole of s is a decimal integer or float."""
    return _NUMBER.fullmatch(s) is not None


def to_string(value: Any) -> str:
    """Return the text form of value."""
    return str(value)


# =============================================================================
# Formatting
# =============================================================================


def to_human_size(num_bytes: int) -> str:
    """
    Format a byte count with a binary unit.

    The value is divided by 1024 until it drops below 1024 or the largest
    unit is reached.

    Example:
        to_human_size(1536) -> "1.50 KB"
    """
    value = float(num_bytes)
    unit = 0
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.2f} {SIZE_UNITS[unit]}"


def decimal_to_binary_string(value: int, length: int) -> str:
    """
    Render the low length bits of value, most significant bit first.

    The result is always exactly length characters long.

    Example:
        decimal_to_binary_string(5, 8) -> "00000101"
    """
    if length <= 0:
        return ""
    return np.binary_repr(value & ((1 << length) - 1), width=length)


def ordinal_suffix(value: int) -> str:
    """Return the English ordinal suffix for value."""
    tens = abs(value) % 100
    if 11 <= tens <= 13:
        return "th"
    return _ORDINAL_SUFFIXES.get(tens % 10, "th")


def get_ordinal(value: int) -> str:
    """Return value followed by its ordinal suffix, e.g. "21st"."""
    return f"{value}{ordinal_suffix(value)}"
