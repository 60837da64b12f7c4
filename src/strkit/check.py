"""
strkit - String Checks.

Prefix, suffix and equality tests, substring counting and word lookup.
Every check is case-sensitive unless called with sensitive=False, in which
case ASCII letters compare without regard to case.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Flag

from strkit.utils.case import policy_for


class WordMatch(Flag):
    """How word_is_among matches the control word against a candidate."""

    EXACT = 1
    PREFIX = 2
    SUFFIX = 4
    ANY = EXACT | PREFIX | SUFFIX


def _limited(length: int, n: int) -> int:
    return min(n, length) if n > 0 else length


def begin_with(s: str, prefix: str, sensitive: bool = True, n: int = 0) -> bool:
    """
    Check if s begins with prefix.

    Matching is case-sensitive by default; sensitive=False opts into
    ASCII case-insensitive matching.

    Args:
        s: Subject string
        prefix: Expected beginning
        sensitive: Compare letters case-sensitively
        n: Only compare the first n characters of prefix (0: all of it)

    Returns:
        True for the very same string object. False when prefix is longer
        than s or either string is empty.
    """
    if prefix is s:
        return True
    if len(prefix) > len(s):
        return False
    if not s or not prefix:
        return False
    limit = _limited(len(prefix), n)
    return policy_for(sensitive).equal(s[:limit], prefix[:limit])


def end_with(s: str, suffix: str, sensitive: bool = True, n: int = 0) -> bool:
    """Check if s ends with suffix; n limits the check to the last n characters."""
    if suffix is s:
        return True
    if len(suffix) > len(s):
        return False
    if not s or not suffix:
        return False
    limit = _limited(len(suffix), n)
    return policy_for(sensitive).equal(s[len(s) - limit:], suffix[len(suffix) - limit:])


def compare(s0: str, s1: str, sensitive: bool = True, n: int = 0) -> bool:
    """
    Check two strings for equality.

    When n > 0 and both strings have at least n characters, only the first
    n are compared, so compare("cat", "catalog", n=3) is True.
    """
    policy = policy_for(sensitive)
    if n > 0 and len(s0) >= n and len(s1) >= n:
        return policy.equal(s0[:n], s1[:n])
    return policy.equal(s0, s1)


def count(s: str, substring: str, sensitive: bool = True) -> int:
    """Count non-overlapping occurrences of substring."""
    if not s or not substring:
        return 0
    policy = policy_for(sensitive)
    return policy.fold(s).count(policy.fold(substring))


def is_abbreviation_of(
    prefix: str, s: str, sensitive: bool = True, min_length: int = 1
) -> bool:
    """
    Check if prefix is an abbreviation of s.

    Example:
        is_abbreviation_of("mag", "magic", min_length=3) -> True
        is_abbreviation_of("ma", "magic", min_length=3) -> False
    """
    if len(prefix) < min_length:
        return False
    return begin_with(s, prefix, sensitive)


def word_is_among(
    word: str,
    words: Iterable[str],
    match: WordMatch = WordMatch.EXACT,
    sensitive: bool = True,
) -> bool:
    """
    Check if word matches any entry of words.

    With WordMatch.PREFIX an entry matches when it begins with word, with
    WordMatch.SUFFIX when it ends with word. Flags combine.
    """
    policy = policy_for(sensitive)
    for candidate in words:
        if WordMatch.EXACT in match and policy.equal(word, candidate):
            return True
        if WordMatch.PREFIX in match and begin_with(candidate, word, sensitive):
            return True
        if WordMatch.SUFFIX in match and end_with(candidate, word, sensitive):
            return True
    return False
