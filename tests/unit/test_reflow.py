"""
Unit tests for the strkit Reflow Engine.
"""

import logging

from strkit.reflow import DEFAULT_WHITESPACE, unwrap, wrap


class TestWrapBasics:
    """Basic wrapping behaviour."""

    def test_equal_words(self):
        """Words exactly as wide as the width end up one per line."""
        assert wrap("AAAA BBBB CCCC DDDD", 4) == "AAAA\nBBBB\nCCCC\nDDDD"

    def test_greedy_fill(self):
        """As many words as fit are kept on each line."""
        assert wrap("aa bb cc dd ee", 5) == "aa bb\ncc dd\nee"

    def test_break_at_exact_width(self):
        """A run starting right at the width boundary is a valid break."""
        assert wrap("abc def", 3) == "abc\ndef"

    def test_short_text_unchanged(self):
        """Text that already fits is returned as is."""
        assert wrap("short line", 40) == "short line"

    def test_width_equal_to_length(self):
        """Text exactly width characters long is not wrapped."""
        assert wrap("abc def", 7) == "abc def"

    def test_empty_text(self):
        """Empty text stays empty."""
        assert wrap("", 10) == ""

    def test_default_whitespace(self):
        """Space, tab and carriage return are the default break characters."""
        assert DEFAULT_WHITESPACE == " \t\r"


class TestWrapWhitespaceRuns:
    """Collapsing of whitespace runs chosen as breaks."""

    def test_run_collapses_to_single_newline(self):
        """A multi-character run becomes exactly one newline."""
        assert wrap("AAAA    BBBB", 4) == "AAAA\nBBBB"

    def test_mixed_whitespace_run(self):
        """Tabs and carriage returns in a run are removed with it."""
        assert wrap("AAAA \t\r BBBB", 6) == "AAAA\nBBBB"

    def test_untouched_runs_are_kept(self):
        """Runs not chosen as breaks keep their characters."""
        assert wrap("a  b cccc", 5) == "a  b\ncccc"

    def test_trailing_run_dropped(self):
        """A trailing run on an overlong line is dropped, not turned into a newline."""
        assert wrap("AAAA ", 4) == "AAAA"
        assert wrap("AAAA BBBB   ", 9) == "AAAA BBBB"

    def test_trailing_run_before_newline(self):
        """Whitespace ending a line never adds a blank line."""
        assert wrap("AAAA \nBBBB", 4) == "AAAA\nBBBB"
        assert wrap("AAAA BBBB\r\nCC DD", 9) == "AAAA BBBB\nCC DD"

    def test_trailing_run_on_short_line_kept(self):
        """Lines that fit keep their trailing whitespace."""
        assert wrap("ab \ncd", 10) == "ab \ncd"

    def test_leading_run_is_not_a_break(self):
        """Indentation at the start of a line is preserved."""
        assert wrap("  AAAA BBBB", 6) == "  AAAA\nBBBB"

    def test_custom_whitespace(self):
        """Callers may choose which characters act as break points."""
        assert wrap("a-b-c-d", 3, whitespace="-") == "a-b\nc-d"

    def test_non_whitespace_chars_not_breaks(self):
        """Characters outside the set never become breaks."""
        assert wrap("a-b-c-d", 3) == "a-b-c-d"


class TestWrapOverflow:
    """Words longer than the width."""

    def test_long_word_is_not_split(self):
        """A word longer than width stays whole."""
        assert wrap("ABCDEFGHIJ", 4) == "ABCDEFGHIJ"

    def test_long_word_then_more(self):
        """Wrapping resumes after an overflowing word."""
        assert wrap("ABCDEFGHIJ KL MN", 5) == "ABCDEFGHIJ\nKL MN"

    def test_long_word_in_the_middle(self):
        """An overflowing word gets a line of its own."""
        assert wrap("A B CCCCCCCCCC D", 4) == "A B\nCCCCCCCCCC\nD"

    def test_width_one(self):
        """Width 1 puts every word on its own line."""
        assert wrap("aa bb c", 1) == "aa\nbb\nc"


class TestWrapExistingNewlines:
    """Newlines already present in the text."""

    def test_newline_restarts_line_length(self):
        """Line lengths are counted from the last newline."""
        assert wrap("AA\nBBBB CCCC", 6) == "AA\nBBBB\nCCCC"

    def test_short_lines_untouched(self):
        """Lines that already fit are not re-wrapped."""
        assert wrap("ab cd\nef gh", 5) == "ab cd\nef gh"

    def test_paragraph_break_survives(self):
        """Blank lines between paragraphs are kept."""
        assert wrap("aaa bbb\n\nccc ddd", 3) == "aaa\nbbb\n\nccc\nddd"


class TestWrapDegenerate:
    """Inputs that leave the text unchanged."""

    def test_zero_width(self, caplog):
        """Width 0 is a no-op and is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="strkit.reflow"):
            assert wrap("AAAA BBBB", 0) == "AAAA BBBB"
        assert "width=0" in caplog.text

    def test_negative_width(self):
        """Negative widths are a no-op."""
        assert wrap("AAAA BBBB", -3) == "AAAA BBBB"

    def test_empty_whitespace_set(self):
        """Without break characters nothing can be wrapped."""
        assert wrap("AAAA BBBB", 4, whitespace="") == "AAAA BBBB"

    def test_no_whitespace(self):
        """A single unbroken token is returned as is."""
        assert wrap("ABCDEFGH", 3) == "ABCDEFGH"


class TestUnwrap:
    """Folding wrapped text back into a line."""

    def test_single_newlines_become_spaces(self):
        """Wrap-induced newlines turn into spaces."""
        assert unwrap("AAAA\nBBBB\nCCCC\nDDDD") == "AAAA BBBB CCCC DDDD"

    def test_space_runs_collapse(self):
        """Runs of spaces shrink to one."""
        assert unwrap("a    b  c") == "a b c"

    def test_newline_runs_keep_one_newline(self):
        """Two or more newlines shrink to a single newline."""
        assert unwrap("AAAA\nBBBB\n\n\nCCCC") == "AAAA BBBB\nCCCC"

    def test_double_newline(self):
        """A blank line becomes one newline."""
        assert unwrap("para one\n\npara two") == "para one\npara two"

    def test_tabs_untouched(self):
        """Only spaces and newlines are collapsed."""
        assert unwrap("a\t\tb") == "a\t\tb"

    def test_leading_and_trailing_runs(self):
        """Runs at the edges are collapsed like any other."""
        assert unwrap("  a\n") == " a "

    def test_single_line_unchanged(self):
        """Text with single spaces and no newlines is already unwrapped."""
        assert unwrap("already one line") == "already one line"

    def test_empty(self):
        """Empty text stays empty."""
        assert unwrap("") == ""
