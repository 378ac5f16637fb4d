"""Utility functions."""
from typing import Any, Optional


def to_int(s: Any) -> Optional[int]:
    """Convert a value to int, returning None if conversion fails."""
    try:
        return int(s) if s is not None else None
    except (TypeError, ValueError):
        return None


def to_float(s: Any) -> Optional[float]:
    """Convert a value to float, returning None if conversion fails."""
    try:
        return float(s) if s is not None else None
    except (TypeError, ValueError):
        return None


def collapse_whitespace(text: str) -> str:
    """Trim and collapse internal whitespace runs to single spaces."""
    return " ".join(text.split())


def title_case(text: str) -> str:
    """Capitalize the first letter of each whitespace-separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


def lower_aligned(text: str) -> str:
    """Lower-case without changing length, so offsets map back to ``text``.

    Characters whose lower-case form is longer (e.g. "İ") are left as-is.
    """
    return "".join(c if len(c.lower()) != 1 else c.lower() for c in text)
