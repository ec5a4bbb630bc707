"""
Small text cleaners applied to pasted and imported notes.
"""

import re
from typing import Callable


_ZERO_WIDTH = re.compile("[\u200b\u200c\u200d\u2060\ufeff]")
_NON_BREAKING_SPACES = re.compile("[\u00a0\u202f]")
_INLINE_SPACE = re.compile(r"[ \t\r\f\v\n]+")
_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")


def collapse_spaces(value: str) -> str:
    """Collapse runs of whitespace, newlines included, into one space.

    Leading and trailing space is kept as a single space so inline fragments
    can still be joined.

    Example:
        >>> collapse_spaces("  bold\\n\\ttext ")
        ' bold text '
    """

    return _INLINE_SPACE.sub(" ", value)


def strip_invisible(value: str) -> str:
    """Replace non-breaking spaces and drop zero-width characters.

    Example:
        >>> strip_invisible("a\\u00a0b\\u200bc")
        'a bc'
    """

    return _ZERO_WIDTH.sub("", _NON_BREAKING_SPACES.sub(" ", value))


def strip_line_ends(value: str) -> str:
    """Remove trailing whitespace from every line."""

    return "\n".join(line.rstrip() for line in value.split("\n"))


def collapse_blank_lines(value: str) -> str:
    """Reduce runs of blank lines to a single blank line.

    Example:
        >>> collapse_blank_lines("a\\n\\n\\n\\nb")
        'a\\n\\nb'
    """

    return _EXTRA_BLANK_LINES.sub("\n\n", value)


def clean_note_text(value: str) -> str:
    """Run all note cleaners in a stable order and trim outer blank lines."""

    cleaners: tuple[Callable[[str], str], ...] = (
        strip_invisible,
        strip_line_ends,
        collapse_blank_lines,
    )
    result = value
    for cleaner in cleaners:
        result = cleaner(result)
    return result.strip("\n")
