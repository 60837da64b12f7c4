"""
ASCII case handling shared by the manipulation and check modules.

Only the 26 ASCII letters change case; every other character, including
non-ASCII letters, passes through untouched.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_upper(s: str) -> str:
    """Upper-case the ASCII letters of s."""
    return s.translate(_TO_UPPER)


def ascii_lower(s: str) -> str:
    """Lower-case the ASCII letters of s."""
    return s.translate(_TO_LOWER)


def is_ascii_alpha(c: str) -> bool:
    """Check if c is a single ASCII letter."""
    return len(c) == 1 and c in string.ascii_letters


@dataclass(frozen=True, slots=True)
class CasePolicy:
    """
    Character comparison under a case policy.

    Attributes:
        sensitive: When False, ASCII letters compare equal regardless of case.
    """

    sensitive: bool = True

    def fold(self, s: str) -> str:
        """Return s in the form used for comparisons."""
        return s if self.sensitive else ascii_lower(s)

    def equal(self, a: str, b: str) -> bool:
        """Compare two strings under this policy."""
        return self.fold(a) == self.fold(b)


SENSITIVE = CasePolicy(True)
INSENSITIVE = CasePolicy(False)


def policy_for(sensitive: bool) -> CasePolicy:
    """Return the shared policy object for a sensitivity flag."""
    return SENSITIVE if sensitive else INSENSITIVE
