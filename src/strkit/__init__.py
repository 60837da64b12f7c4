"""
strkit - Stateless string utilities.

A paragraph reflow engine (wrap / unwrap) plus a set of small pure
functions for trimming, alignment, case conversion, replacement,
prefix/suffix checks, counting and number formatting. Case handling is
ASCII only.
"""

from strkit.check import (
    WordMatch,
    begin_with,
    compare,
    count,
    end_with,
    is_abbreviation_of,
    word_is_among,
)
from strkit.convert import (
    SIZE_UNITS,
    decimal_to_binary_string,
    get_ordinal,
    is_number,
    ordinal_suffix,
    to_double,
    to_human_size,
    to_number,
    to_string,
)
from strkit.manipulate import (
    calign,
    capitalize,
    decapitalize,
    lalign,
    ltrim,
    ralign,
    replace,
    rtrim,
    split,
    strip,
    to_lower,
    to_upper,
    trim,
)
from strkit.reflow import DEFAULT_WHITESPACE, unwrap, wrap
from strkit.utils.errors import InvalidArgumentError, StrkitError

__version__ = "1.2.0"
__all__ = [
    # Reflow
    "wrap",
    "unwrap",
    "DEFAULT_WHITESPACE",
    # Manipulation
    "trim",
    "ltrim",
    "rtrim",
    "to_upper",
    "to_lower",
    "lalign",
    "ralign",
    "calign",
    "replace",
    "strip",
    "split",
    "capitalize",
    "decapitalize",
    # Checks
    "begin_with",
    "end_with",
    "compare",
    "count",
    "is_abbreviation_of",
    "word_is_among",
    "WordMatch",
    # Conversions
    "to_number",
    "to_double",
    "is_number",
    "to_string",
    "to_human_size",
    "decimal_to_binary_string",
    "ordinal_suffix",
    "get_ordinal",
    "SIZE_UNITS",
    # Errors
    "StrkitError",
    "InvalidArgumentError",
]
