"""Inline emphasis for documentation markup."""

from typing import Optional

from boxdoc.formatting.styles import ANSI_STYLE, Emphasis, EmphasisStyle


class Emphasizer:
    """Replace inline markup with terminal escape sequences.

    Recognized markup:
    - *italic*, **bold** and ***bold italic***
    - <identifier>, shown upper-cased and underlined

    Star emphasis cannot be nested or used inside a word. An opener must
    follow whitespace (or start the text) and be followed by a non-space
    character; a closer must follow a non-space character. Anything that
    does not match is kept as written, and an unterminated span is closed
    at the end of the text.
    """

    OPENERS = {
        1: Emphasis.ITALIC,
        2: Emphasis.BOLD,
        3: Emphasis.BOLD_ITALIC,
    }

    def __init__(self, style: Optional[EmphasisStyle] = None) -> None:
        """Initialize the emphasizer.

        Args:
            style: Escape sequences to emit (default: ANSI)
        """
        self.style = style or ANSI_STYLE

    def emphasize(self, text: str) -> str:
        """Return text with all recognized markup replaced."""
        out: list[str] = []
        prev = " "
        opener = ""
        closing = False
        pos = 0
        length = len(text)

        while pos < length:
            char = text[pos]

            if char == "*":
                if opener or prev.isspace():
                    opener += char
                else:
                    closing = True
                pos += 1
                continue

            if opener:
                out.append(self._open(opener, char))
                opener = ""
            if closing:
                out.append(self.style.reset)
                closing = False

            if char == "<":
                end = text.find(">", pos + 1)
                if end == -1:
                    end = length
                out.append(self.style.underline)
                out.append(text[pos + 1 : end].upper())
                out.append(self.style.reset)
                prev = ">"
                pos = end + 1
                continue

            out.append(char)
            prev = char
            pos += 1

        # Tokens left over at the end of the text
        if opener:
            out.append(opener)
        if closing:
            out.append(self.style.reset)

        return "".join(out)

    def _open(self, opener: str, following: str) -> str:
        """Resolve a pending star run now that the next character is known."""
        emphasis = self.OPENERS.get(len(opener))
        if emphasis is None or following.isspace():
            return opener
        return self.style.begin(emphasis)


def emphasize(text: str, style: Optional[EmphasisStyle] = None) -> str:
    """Replace inline emphasis markup in a single piece of text."""
    return Emphasizer(style).emphasize(text)
