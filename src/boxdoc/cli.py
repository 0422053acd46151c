"""Command-line interface for boxdoc."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from boxdoc import __version__
from boxdoc.config import get_settings
from boxdoc.formatting import (
    emph,
    emphasize,
    fill_from,
    fill_in,
    plain,
    top_title,
    wrap,
)
from boxdoc.output import print_paged, print_text

app = typer.Typer(
    name="boxdoc",
    help="Format command documentation markup for the terminal.",
    add_completion=False,
)
console = Console(stderr=True)
logger = logging.getLogger("boxdoc.cli")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_text(f"boxdoc v{__version__}")
        raise typer.Exit()


def read_input(path: Optional[Path]) -> str:
    """Read markup from a file, or from standard input when no path is given."""
    if path is None:
        logger.debug("Reading markup from standard input")
        return sys.stdin.read()
    logger.debug("Reading markup from %s", path)
    try:
        with path.open(encoding="utf-8", newline="") as stream:
            return stream.read()
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Could not read {path}: {e}")
        raise typer.Exit(1)


def show(text: str, pager: bool) -> None:
    """Write formatted output, through the pager if requested."""
    if pager:
        print_paged(text)
    else:
        print_text(text)


PathArgument = typer.Argument(
    None,
    help="Markup file to read (default: standard input)",
    exists=True,
    dir_okay=False,
)
IndentOption = typer.Option(
    None,
    "--indent",
    "-i",
    help="Spaces to indent every line (default: BOXDOC_INDENT or 0)",
)
WidthOption = typer.Option(
    None,
    "--width",
    "-w",
    help="Line width; 0 disables wrapping (default: BOXDOC_WIDTH or 80)",
)
PagerOption = typer.Option(
    False,
    "--pager/--no-pager",
    help="Page long output through less",
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on standard error",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Format documentation markup: *italic*, **bold**, ***bold italic***,
    <identifiers>, raw blocks indented four spaces, and hard breaks made
    with two trailing spaces.

    Examples:

        boxdoc emph README.txt --width 72 --indent 7

        boxdoc plain < usage.txt

        boxdoc title MYCMD "User Commands" MYCMD --cols 72
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@app.command("emph")
def emph_command(
    path: Optional[Path] = PathArgument,
    indent: Optional[int] = IndentOption,
    width: Optional[int] = WidthOption,
    pager: bool = PagerOption,
) -> None:
    """Format markup with terminal emphasis."""
    settings = get_settings()
    text = emph(
        read_input(path),
        settings.indent if indent is None else indent,
        settings.width if width is None else width,
        settings.emphasis_style(),
    )
    show(text, pager)


@app.command("plain")
def plain_command(
    path: Optional[Path] = PathArgument,
    indent: Optional[int] = IndentOption,
    width: Optional[int] = WidthOption,
    pager: bool = PagerOption,
) -> None:
    """Format markup as plain text, keeping emphasis markup as written."""
    settings = get_settings()
    text = plain(
        read_input(path),
        settings.indent if indent is None else indent,
        settings.width if width is None else width,
    )
    show(text, pager)


@app.command("emphasize")
def emphasize_command(path: Optional[Path] = PathArgument) -> None:
    """Resolve inline emphasis only, without any block layout."""
    style = get_settings().emphasis_style()
    print_text(emphasize(read_input(path), style), newline=False)


@app.command("wrap")
def wrap_command(
    path: Optional[Path] = PathArgument,
    width: Optional[int] = WidthOption,
) -> None:
    """Wrap text to a width without any other formatting."""
    settings = get_settings()
    print_text(
        wrap(read_input(path), settings.width if width is None else width),
        newline=False,
    )


@app.command("title")
def title_command(
    left: str = typer.Argument(..., help="Text at the start of the line"),
    center: str = typer.Argument(..., help="Text in the middle of the line"),
    right: str = typer.Argument(..., help="Text at the end of the line"),
    cols: Optional[int] = typer.Option(
        None,
        "--cols",
        "-c",
        help="Width of the title line (default: BOXDOC_WIDTH or 80)",
    ),
) -> None:
    """Print a man page style title line."""
    settings = get_settings()
    print_text(top_title(left, center, right, settings.width if cols is None else cols))


@app.command("fill")
def fill_command(
    fields: Optional[list[str]] = typer.Argument(
        None,
        help="Values for {1}, {2}, ... in order",
    ),
    form: Optional[Path] = typer.Option(
        None,
        "--form",
        "-f",
        help="Form file to fill in (default: standard input)",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """Fill in the numbered fields of a form."""
    values = fields or []
    if form is None:
        text = fill_in(*values)
    else:
        with form.open(encoding="utf-8") as stream:
            text = fill_from(stream, *values)
    print_text(text, newline=False)


if __name__ == "__main__":
    app()
