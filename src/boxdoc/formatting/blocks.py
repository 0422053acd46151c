"""Block-level layout of documentation markup.

The markup is a very small Markdown-like dialect meant for command help:

- Leading and trailing blank lines are removed.
- Convenience indentation is removed. The number of spaces before the
  first word of the first non-blank line is dropped from every line,
  including raw blocks.
- Raw blocks are kept exactly. Any line starting with four or more spaces
  (after the convenience indentation is removed) is copied as is.
- Prose blocks are unwrapped, then wrapped again to the requested width.
- Hard breaks are kept. A line ending in two or more spaces forces a line
  return, like Markdown.
- Inline emphasis is resolved by ``Emphasizer`` (see ``emphasis.py``).
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from boxdoc.formatting.emphasis import Emphasizer
from boxdoc.formatting.styles import EmphasisStyle
from boxdoc.formatting.wrap import indent as indent_text
from boxdoc.formatting.wrap import wrap

RAW_INDENT = "    "
HARD_BREAK = "  "

# Columns reserved for the visual margin of a prose block
BLOCK_MARGIN = 4


class ParseMode(Enum):
    """Where the parser currently is within the document."""

    OUTSIDE = auto()
    IN_RAW = auto()
    IN_PROSE = auto()


@dataclass
class ParseState:
    """Mutable state for a single ``BlockParser.format`` call.

    Attributes:
        width: Requested output width
        strip_width: Convenience indentation, fixed by the first non-blank line
        mode: Current block kind
        prose: Text of the open prose block
        hard_break_pending: Previous prose line ended with a hard break
        output: Formatted chunks so far
    """

    width: int
    strip_width: Optional[int] = None
    mode: ParseMode = ParseMode.OUTSIDE
    prose: str = ""
    hard_break_pending: bool = False
    output: list[str] = field(default_factory=list)

    @property
    def wrap_width(self) -> int:
        """Width available to prose once indentation and margin are removed."""
        return self.width - (self.strip_width or 0) - BLOCK_MARGIN


def leading_spaces(line: str) -> int:
    """Count the space characters before the first other character."""
    return len(line) - len(line.lstrip(" "))


class BlockParser:
    """Lay out documentation markup for a fixed-width terminal.

    The same parser produces both emphasized and plain output. With an
    ``Emphasizer`` every prose block is passed through it after wrapping;
    without one, markup characters are left as written. Raw blocks are
    never wrapped or emphasized.
    """

    def __init__(self, emphasizer: Optional[Emphasizer] = None) -> None:
        """Initialize the parser.

        Args:
            emphasizer: Applied to wrapped prose blocks (None for plain text)
        """
        self.emphasizer = emphasizer

    def format(self, markup: str, indent: int = 0, width: int = 80) -> str:
        """Format a markup document.

        Args:
            markup: The documentation markup
            indent: Spaces to prefix every output line with
            width: Target line width in characters (0 disables wrapping;
                too small to fit the margin means no breaks at spaces)

        Returns:
            The formatted text
        """
        state = ParseState(width=width)
        for line in markup.split("\n"):
            self.feed(state, line)
        if state.mode is ParseMode.IN_PROSE:
            self._close_prose(state)
        return indent_text("".join(state.output).strip("\n"), indent)

    def feed(self, state: ParseState, line: str) -> None:
        """Advance the parse state by one input line."""
        trimmed = line.strip()

        if state.mode is ParseMode.OUTSIDE and not trimmed:
            return

        if state.strip_width is None:
            state.strip_width = leading_spaces(line)
        if len(line) >= state.strip_width:
            line = line[state.strip_width :]

        if state.mode is ParseMode.IN_RAW:
            if not trimmed:
                state.mode = ParseMode.OUTSIDE
                return
            if line.startswith(RAW_INDENT):
                state.output.append("\n" + line)
                return
            # Dedented text ends the raw block and starts prose
            state.mode = ParseMode.OUTSIDE

        if state.mode is ParseMode.IN_PROSE:
            if not trimmed:
                self._close_prose(state)
                return
            separator = "\n" if state.hard_break_pending else " "
            state.prose += separator + trimmed
            state.hard_break_pending = line.endswith(HARD_BREAK)
            return

        if line.startswith(RAW_INDENT):
            state.mode = ParseMode.IN_RAW
            state.output.append("\n\n" + line)
            return

        state.mode = ParseMode.IN_PROSE
        state.prose = trimmed
        state.hard_break_pending = line.endswith(HARD_BREAK)

    def _close_prose(self, state: ParseState) -> None:
        """Wrap, emphasize and emit the open prose block."""
        text = wrap(state.prose, state.wrap_width)
        if self.emphasizer is not None:
            text = self.emphasizer.emphasize(text)
        state.output.append("\n\n" + text)
        state.prose = ""
        state.hard_break_pending = False
        state.mode = ParseMode.OUTSIDE


def emph(
    markup: str,
    indent: int = 0,
    width: int = 80,
    style: Optional[EmphasisStyle] = None,
) -> str:
    """Format documentation markup with terminal emphasis."""
    return BlockParser(Emphasizer(style)).format(markup, indent, width)


def plain(markup: str, indent: int = 0, width: int = 80) -> str:
    """Format documentation markup, leaving emphasis markup as written."""
    return BlockParser().format(markup, indent, width)
