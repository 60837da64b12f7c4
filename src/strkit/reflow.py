"""
strkit Reflow Engine.

Converts a paragraph between its single-line form and a form wrapped to a
target width:

- wrap: replace whitespace runs with line breaks, greedily
- unwrap: fold wrapped lines back into one, keeping paragraph breaks

For text without blank lines the two form a round trip: unwrapping a
wrapped paragraph gives the paragraph back with every whitespace run
collapsed to a single space.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

DEFAULT_WHITESPACE = " \t\r"

_SPACES_OR_NEWLINES = re.compile(r" {2,}|\n+")


# =============================================================================
# Wrapping
# =============================================================================


def _run_pattern(whitespace: str) -> re.Pattern[str]:
    """Build a regex matching maximal runs of the given whitespace characters."""
    return re.compile("[" + "".join(re.escape(c) for c in whitespace) + "]+")


def _wrap_line(line: str, width: int, runs_re: re.Pattern[str]) -> str:
    """
    Wrap a single line that contains no newline.

    The break for each output line is the rightmost whitespace run starting
    within width characters of the line start. When the first word is
    already too long, the break falls on the first run after it instead.
    A run at position 0 is indentation and never becomes a break. A run
    ending the line is dropped rather than turned into an empty line.
    """
    if len(line) <= width:
        return line

    runs = [m.span() for m in runs_re.finditer(line) if m.start() > 0]
    end = len(line)
    if runs and runs[-1][1] == end:
        end = runs.pop()[0]
    pieces: list[str] = []
    start = 0
    i = 0

    while end - start > width and i < len(runs):
        limit = start + width
        best = None
        while i < len(runs) and runs[i][0] <= limit:
            best = i
            i += 1
        if best is None:
            # Overflowing word
            best = i
            i += 1
        run_start, run_end = runs[best]
        pieces.append(line[start:run_start])
        start = run_end

    pieces.append(line[start:end])
    return "\n".join(pieces)


def wrap(text: str, width: int, whitespace: str = DEFAULT_WHITESPACE) -> str:
    """
    Break text into lines of at most width characters.

    Each chosen whitespace run is replaced by a single newline, however
    long the run is. Words are never split, so a word longer than width
    stays on a line of its own. Newlines already in the text are kept and
    restart the line length count.

    Args:
        text: Paragraph text
        width: Maximum line length
        whitespace: Characters that may be turned into line breaks

    Returns:
        The wrapped text

    Example:
        wrap("AAAA BBBB CCCC DDDD", 4) -> "AAAA\\nBBBB\\nCCCC\\nDDDD"
    """
    if width < 1:
        logger.debug("wrap called with width=%d, returning text unchanged", width)
        return text
    if not whitespace:
        logger.debug("wrap called with an empty whitespace set, returning text unchanged")
        return text
    if not text:
        return text

    runs_re = _run_pattern(whitespace)
    return "\n".join(_wrap_line(line, width, runs_re) for line in text.split("\n"))


# =============================================================================
# Unwrapping
# =============================================================================


def _collapse(match: re.Match[str]) -> str:
    run = match.group()
    if run[0] == "\n" and len(run) > 1:
        return "\n"
    return " "


def unwrap(text: str) -> str:
    """
    Fold wrapped text back into a single line.

    Runs of spaces shrink to one space. A lone newline becomes a space,
    while a run of two or more newlines shrinks to one newline, so
    paragraph breaks survive.

    Example:
        unwrap("AAAA\\nBBBB\\n\\n\\nCCCC") -> "AAAA BBBB\\nCCCC"
    """
    return _SPACES_OR_NEWLINES.sub(_collapse, text)
