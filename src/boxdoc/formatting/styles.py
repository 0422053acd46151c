"""Terminal escape sequences used for inline emphasis.

The formatter never touches these module constants directly. Callers build
an ``EmphasisStyle`` (usually from ``boxdoc.config.Settings``) and pass it
in, so the escape values can be overridden per terminal without any global
state.
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# ANSI SGR sequences
# =============================================================================

RESET = "\033[0m"
BOLD = "\033[1m"
ITALIC = "\033[3m"
UNDERLINE = "\033[4m"
BOLD_ITALIC = "\033[1;3m"


class Emphasis(Enum):
    """Inline emphasis kinds recognized in documentation markup."""

    ITALIC = auto()
    BOLD = auto()
    BOLD_ITALIC = auto()
    UNDERLINE = auto()


@dataclass(frozen=True)
class EmphasisStyle:
    """Begin sequences for each emphasis kind plus the shared reset.

    Attributes:
        italic: Emitted in place of a ``*`` opener
        bold: Emitted in place of a ``**`` opener
        bold_italic: Emitted in place of a ``***`` opener
        underline: Emitted in place of ``<``
        reset: Emitted in place of any closer and ``>``
    """

    italic: str = ITALIC
    bold: str = BOLD
    bold_italic: str = BOLD_ITALIC
    underline: str = UNDERLINE
    reset: str = RESET

    def begin(self, emphasis: Emphasis) -> str:
        """Return the begin sequence for an emphasis kind."""
        if emphasis is Emphasis.ITALIC:
            return self.italic
        if emphasis is Emphasis.BOLD:
            return self.bold
        if emphasis is Emphasis.BOLD_ITALIC:
            return self.bold_italic
        return self.underline


# Default ANSI style used when no style is passed
ANSI_STYLE = EmphasisStyle()
