"""Helpers for turning help values into text."""

from typing import Any


def to_string(value: Any) -> str:
    """Convert a value to text for display.

    Documentation is often computed at display time, so a zero-argument
    callable is called and its result converted instead. None becomes an
    empty string.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if callable(value) and not isinstance(value, type):
        result = value()
        return "" if result is None else str(result)
    return str(value)


def stringify(*values: Any) -> list[str]:
    """Convert every value with ``to_string``."""
    return [to_string(value) for value in values]


def line_count(text: str) -> int:
    """Count the line returns in text."""
    return text.count("\n")
