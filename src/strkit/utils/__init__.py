"""
strkit Utilities Package.

ASCII case handling and error types shared across the library.
"""

from strkit.utils.case import (
    INSENSITIVE,
    SENSITIVE,
    # Comparator
    CasePolicy,
    # Case conversion
    ascii_lower,
    ascii_upper,
    is_ascii_alpha,
    policy_for,
)
from strkit.utils.errors import (
    InvalidArgumentError,
    StrkitError,
)

__all__ = [
    # Errors
    "StrkitError",
    "InvalidArgumentError",
    # Case conversion
    "ascii_upper",
    "ascii_lower",
    "is_ascii_alpha",
    # Comparator
    "CasePolicy",
    "SENSITIVE",
    "INSENSITIVE",
    "policy_for",
]
