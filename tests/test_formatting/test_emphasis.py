"""Tests for inline emphasis."""

import pytest

from boxdoc.formatting.emphasis import Emphasizer, emphasize
from boxdoc.formatting.styles import (
    BOLD,
    BOLD_ITALIC,
    ITALIC,
    RESET,
    UNDERLINE,
    EmphasisStyle,
)


class TestEmphasizeDefaults:
    """Tests for the ANSI default escapes."""

    @pytest.mark.parametrize(
        "markup, expected",
        [
            ("*Italic*", ITALIC + "Italic" + RESET),
            ("**Bold**", BOLD + "Bold" + RESET),
            ("***BoldItalic***", BOLD_ITALIC + "BoldItalic" + RESET),
            ("<bracketed>", UNDERLINE + "BRACKETED" + RESET),
        ],
    )
    def test_each_style(self, markup: str, expected: str):
        """Test every emphasis kind on its own."""
        assert emphasize(markup) == expected

    def test_plain_text_unchanged(self):
        """Test that text without markup passes through."""
        assert emphasize("Nothing to see here.") == "Nothing to see here."

    def test_empty(self):
        """Test the empty string."""
        assert emphasize("") == ""


class TestEmphasizer:
    """Tests for the Emphasizer edge cases."""

    @pytest.fixture
    def emphasizer(self, tag_style: EmphasisStyle) -> Emphasizer:
        """Create an emphasizer with readable escapes."""
        return Emphasizer(tag_style)

    def test_inside_sentence(self, emphasizer: Emphasizer):
        """Test emphasis surrounded by other words."""
        result = emphasizer.emphasize("This is **bold** and *this* too")

        assert result == "This is <b>bold</> and <i>this</> too"

    def test_multiword_span(self, emphasizer: Emphasizer):
        """Test a span that contains spaces."""
        assert emphasizer.emphasize("*two words*") == "<i>two words</>"

    def test_star_followed_by_space_is_literal(self, emphasizer: Emphasizer):
        """Test that an opener must be followed by a non-space."""
        assert emphasizer.emphasize("a * b") == "a * b"
        assert emphasizer.emphasize("a ** b") == "a ** b"

    def test_long_star_run_is_literal(self, emphasizer: Emphasizer):
        """Test that four or more stars do not open anything."""
        assert emphasizer.emphasize("****four") == "****four"

    def test_unterminated_span_closed_at_end(self, emphasizer: Emphasizer):
        """Test that an unclosed opener still emits its style."""
        assert emphasizer.emphasize("**bold to the end") == "<b>bold to the end"

    def test_trailing_closer(self, emphasizer: Emphasizer):
        """Test that a closer at the very end emits a reset."""
        assert emphasizer.emphasize("**word**") == "<b>word</>"
        assert emphasizer.emphasize("done**") == "done</>"

    def test_trailing_opener_is_literal(self, emphasizer: Emphasizer):
        """Test that stars left dangling at the end are kept."""
        assert emphasizer.emphasize("end *") == "end *"

    def test_closer_before_punctuation(self, emphasizer: Emphasizer):
        """Test a closer followed by punctuation."""
        assert emphasizer.emphasize("*word*.") == "<i>word</>."

    def test_identifier_upper_cased(self, emphasizer: Emphasizer):
        """Test that identifiers lose their brackets and are upper-cased."""
        result = emphasizer.emphasize("usage: cmd <name> [<count>]")

        assert result == "usage: cmd <u>NAME</> [<u>COUNT</>]"

    def test_unterminated_identifier(self, emphasizer: Emphasizer):
        """Test that a missing '>' consumes to the end without failing."""
        assert emphasizer.emphasize("see <rest of it") == "see <u>REST OF IT</>"

    def test_lone_open_bracket_at_end(self, emphasizer: Emphasizer):
        """Test a '<' as the very last character."""
        assert emphasizer.emphasize("x <") == "x <u></>"

    def test_stray_close_bracket_literal(self, emphasizer: Emphasizer):
        """Test that '>' outside of a span is kept."""
        assert emphasizer.emphasize("a > b") == "a > b"

    def test_emphasized_identifier(self, emphasizer: Emphasizer):
        """Test an identifier inside italic markers."""
        assert emphasizer.emphasize("*<arg>*") == "<i><u>ARG</></>"

    def test_newline_counts_as_space(self, emphasizer: Emphasizer):
        """Test that openers work at the start of a wrapped line."""
        assert emphasizer.emphasize("one\n*two*") == "one\n<i>two</>"

    def test_intraword_star(self, emphasizer: Emphasizer):
        """Test that a star inside a word acts as a closer."""
        assert emphasizer.emphasize("a*b") == "a</>b"

    def test_no_nesting(self, emphasizer: Emphasizer):
        """Test that styles are single level."""
        result = emphasizer.emphasize("**bold *italic* bold**")

        assert result == "<b>bold <i>italic</> bold</>"
