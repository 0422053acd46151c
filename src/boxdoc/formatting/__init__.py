"""Formatting of command documentation markup for the terminal."""

from boxdoc.formatting.styles import (
    ANSI_STYLE,
    Emphasis,
    EmphasisStyle,
)
from boxdoc.formatting.emphasis import Emphasizer, emphasize
from boxdoc.formatting.wrap import indent, peek_word, wrap
from boxdoc.formatting.blocks import BlockParser, ParseMode, ParseState, emph, plain
from boxdoc.formatting.title import top_title
from boxdoc.formatting.fill import fill, fill_from, fill_in
from boxdoc.formatting.text import line_count, stringify, to_string

__all__ = [
    "ANSI_STYLE",
    "Emphasis",
    "EmphasisStyle",
    "Emphasizer",
    "emphasize",
    "indent",
    "peek_word",
    "wrap",
    "BlockParser",
    "ParseMode",
    "ParseState",
    "emph",
    "plain",
    "top_title",
    "fill",
    "fill_from",
    "fill_in",
    "line_count",
    "stringify",
    "to_string",
]
