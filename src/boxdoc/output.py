"""Writing formatted documentation to the terminal."""

import logging
import shutil
import subprocess
from typing import Optional

from rich.console import Console

from boxdoc.config import get_settings
from boxdoc.formatting.text import line_count

logger = logging.getLogger("boxdoc.output")

stdout_console = Console()


def print_text(
    text: str,
    newline: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Write text exactly as given.

    The text goes straight to the console file, bypassing rich rendering,
    so escape sequences and control characters in raw blocks are kept.
    """
    target = console if console is not None else stdout_console
    target.file.write(text + ("\n" if newline else ""))
    target.file.flush()


def smart_print(text: str, console: Optional[Console] = None) -> None:
    """Write text, adding a line return only when writing to a terminal."""
    target = console if console is not None else stdout_console
    print_text(text, newline=target.is_terminal, console=target)


def print_paged(
    text: str,
    status: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Show text through the ``less`` pager when it does not fit the screen.

    Falls back to ``print_text`` when not writing to a terminal, when
    ``less`` is not installed, or when the text is shorter than the
    terminal. Control returns to the caller once the pager exits.

    Args:
        text: The text to show
        status: Prompt for the bottom of the pager (default from settings;
            pass a single space for none)
        console: Console to write to
    """
    target = console if console is not None else stdout_console
    if not status:
        status = get_settings().pager_status

    pager = shutil.which("less")
    if (
        pager is None
        or not target.is_terminal
        or line_count(text) < target.size.height
    ):
        print_text(text, console=target)
        return

    try:
        subprocess.run([pager, "-r", f"-Ps{status}"], input=text, text=True, check=False)
    except OSError as e:
        logger.warning("Could not start pager %s: %s", pager, e)
        print_text(text, console=target)
