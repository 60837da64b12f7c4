"""
strkit - String Manipulation.

Provides trimming, alignment, case conversion, replacement, tokenizing and
word capitalization. Every function returns a new string.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import List

from strkit.utils.case import ascii_lower, ascii_upper, is_ascii_alpha
from strkit.utils.errors import InvalidArgumentError

# =============================================================================
# Trimming
# =============================================================================


def trim(s: str, padchars: str = " ") -> str:
    """Remove the characters in padchars from both ends."""
    return s.strip(padchars)


def ltrim(s: str, padchars: str = " ") -> str:
    """Remove the characters in padchars from the start."""
    return s.lstrip(padchars)


def rtrim(s: str, padchars: str = " ") -> str:
    """Remove the characters in padchars from the end."""
    return s.rstrip(padchars)


# =============================================================================
# Case Conversion
# =============================================================================


def to_upper(s: str) -> str:
    """Convert ASCII letters to uppercase."""
    return ascii_upper(s)


def to_lower(s: str) -> str:
    """Convert ASCII letters to lowercase."""
    return ascii_lower(s)


def _recase(s: str, count: int, convert: Callable[[str], str]) -> str:
    chars = list(s)
    remaining = count
    for i, c in enumerate(chars):
        if count > 0 and remaining == 0:
            break
        if (i == 0 and is_ascii_alpha(c)) or (i > 0 and chars[i - 1] == " "):
            chars[i] = convert(c)
            remaining -= 1
    return "".join(chars)


def capitalize(s: str, count: int = 1) -> str:
    """
    Upper-case the first letter of the string and of following words.

    A position counts as a word start when it is position 0 holding an
    ASCII letter, or when it directly follows a space. Tabs and newlines
    do not start words.

    Args:
        s: Input string
        count: Number of word starts to convert (0 or less: all of them)

    Example:
        capitalize("hello there friend!", 2) -> "Hello There friend!"
    """
    return _recase(s, count, ascii_upper)


def decapitalize(s: str, count: int = 1) -> str:
    """Lower-case word starts; the mirror of capitalize."""
    return _recase(s, count, ascii_lower)


# =============================================================================
# Alignment
# =============================================================================


def _check_fill(fill: str) -> None:
    if len(fill) != 1:
        raise InvalidArgumentError(
            f"fill must be a single character, got {fill!r}", argument="fill"
        )


def lalign(s: str, width: int, fill: str = " ") -> str:
    """Pad on the right to width."""
    _check_fill(fill)
    return s.ljust(width, fill)


def ralign(s: str, width: int, fill: str = " ") -> str:
    """Pad on the left to width."""
    _check_fill(fill)
    return s.rjust(width, fill)


def calign(s: str, width: int, fill: str = " ") -> str:
    """
    Center s within width.

    When the padding is odd, the extra fill character goes on the right.

    Example:
        calign("hello", 10) -> "  hello   "
    """
    _check_fill(fill)
    pad = width - len(s)
    if pad <= 0:
        return s
    left = pad // 2
    return fill * left + s + fill * (pad - left)


# =============================================================================
# Replacement and Removal
# =============================================================================


def replace(s: str, substring: str, substitute: str, count: int = 0) -> str:
    """
    Replace occurrences of substring, scanning left to right.

    Matches never overlap and inserted text is never searched again, so a
    substitute containing substring cannot loop.

    Args:
        s: Input string
        substring: Text to look for; empty means nothing to replace
        substitute: Replacement text
        count: Maximum replacements (0 or less: all of them)
    """
    if not substring:
        return s
    return s.replace(substring, substitute, count if count > 0 else -1)


def strip(s: str, char: str) -> str:
    """Remove every occurrence of char."""
    if not char:
        return s
    return s.replace(char, "")


def split(s: str, delimiters: str) -> List[str]:
    """
    Split s on any of the delimiter characters.

    Consecutive, leading and trailing delimiters never produce empty tokens.

    Example:
        split(",a,,b;c,", ",;") -> ["a", "b", "c"]
    """
    if not delimiters:
        return [s] if s else []
    pattern = "[" + "".join(re.escape(c) for c in delimiters) + "]"
    return [token for token in re.split(pattern, s) if token]
