"""
Pytest configuration and shared fixtures for strkit tests.
"""

import pytest

from strkit.reflow import unwrap, wrap

GOLDEN_RATIO = (
    "Two quantities are in the golden ratio if their ratio is the same as the "
    "ratio of their sum to the larger of the two quantities."
)

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua. Ut enim ad minim "
    "veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea "
    "commodo consequat. Duis aute irure dolor in reprehenderit in voluptate "
    "velit esse cillum dolore eu fugiat nulla pariatur."
)


@pytest.fixture
def golden_ratio() -> str:
    """A single-line paragraph of ordinary prose."""
    return GOLDEN_RATIO


@pytest.fixture
def lorem() -> str:
    """A longer single-line paragraph with single spaces."""
    return LOREM


@pytest.fixture
def line_lengths():
    """Fixture returning the length of every line of a text."""

    def _line_lengths(text: str) -> list[int]:
        return [len(line) for line in text.split("\n")]

    return _line_lengths


@pytest.fixture
def round_trip():
    """Fixture wrapping then unwrapping text at a given width."""

    def _round_trip(text: str, width: int) -> str:
        return unwrap(wrap(text, width))

    return _round_trip
