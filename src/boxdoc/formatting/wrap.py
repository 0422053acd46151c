"""Word wrapping and indentation of formatted text."""

import re

# A run of non-whitespace starting at a given position (possibly empty)
WORD_PATTERN = re.compile(r"\S*")


def peek_word(text: str, start: int) -> str:
    """Return the characters from ``start`` up to the next whitespace.

    Returns an empty string when ``start`` is on whitespace or past the end.
    """
    return WORD_PATTERN.match(text, min(start, len(text))).group()


def wrap(text: str, width: int) -> str:
    """Wrap text to the given width, breaking only on whitespace.

    Existing line returns are hard breaks and are always kept. Words longer
    than the width are never split, so such a word gets a line of its own.

    Args:
        text: The text to wrap
        width: Maximum line length in characters. Zero returns the text
            unchanged; a negative width never breaks at spaces, so only the
            existing line returns remain.

    Returns:
        The wrapped text
    """
    if width == 0:
        return text

    out: list[str] = []
    current = 0
    for pos, char in enumerate(text):
        if char == "\n":
            out.append("\n")
            current = 0
            continue
        if width > 0 and char.isspace():
            next_word = peek_word(text, pos + 1)
            if current + len(next_word) + 1 > width:
                out.append("\n")
                current = 0
                continue
        out.append(char)
        current += 1
    return "".join(out)


def indent(text: str, spaces: int) -> str:
    """Prefix every line of text with the given number of spaces.

    Negative counts are treated as zero.
    """
    pad = " " * max(spaces, 0)
    return "\n".join(pad + line for line in text.split("\n"))
