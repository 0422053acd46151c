"""Tests for the man page title line."""

import pytest

from boxdoc.formatting.title import top_title


class TestTopTitle:
    """Tests for top_title with the same three headings."""

    @pytest.mark.parametrize(
        "cols, expected",
        [
            (30, "left        center       right"),
            (21, "left   center  right"),
            (20, "left   center  right"),
            (15, "leftcenterright"),
            (14, "center   right"),
            (10, "  center  "),
            (6, "center"),
            (4, "cent"),
        ],
    )
    def test_layout(self, cols: int, expected: str):
        """Test each layout case as the width shrinks."""
        assert top_title("left", "center", "right", cols) == expected

    def test_counts_characters(self):
        """Test widths with non-ASCII headings."""
        assert top_title("ö", "ü", "ä", 5) == "ö ü ä"

    def test_truncate_counts_characters(self):
        """Test truncating a non-ASCII center."""
        assert top_title("l", "ünïcödé", "r", 3) == "ünï"

    def test_negative_cols(self):
        """Test that a negative width gives an empty line."""
        assert top_title("left", "center", "right", -1) == ""
