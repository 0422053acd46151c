"""Fill in numbered fields of a simple text form.

Fields are written as ``{1}``, ``{2}`` and so on. This is much simpler
than a full template engine and works well with snippet libraries.
"""

import sys
from typing import TextIO


def fill(form: str, *fields: str) -> str:
    """Replace ``{n}`` in the form with the n-th field (counting from one)."""
    for number, value in enumerate(fields, start=1):
        form = form.replace(f"{{{number}}}", value)
    return form


def fill_from(stream: TextIO, *fields: str) -> str:
    """Read the whole form from a text stream and fill it in."""
    return fill(stream.read(), *fields)


def fill_in(*fields: str) -> str:
    """Read the whole form from standard input and fill it in."""
    return fill_from(sys.stdin, *fields)
