"""
Text helpers for estimating soft wraps.
"""

from __future__ import annotations

from typing import List


def wrap_line(line: str, max_chars: int) -> List[str]:
    """Greedily wrap a line on single spaces into visual lines.

    Lines that already fit are returned untouched. A word longer than
    ``max_chars`` is placed whole on its own visual line, the way a browser
    soft-wraps rather than breaking inside a word. Joining the result with
    single spaces reproduces ``line`` exactly.

    Args:
        line: Raw document line without its newline.
        max_chars: Estimated character capacity of one visual line.
    Returns:
        Visual lines in reading order; never empty.

    Example:
        >>> wrap_line("the quick brown fox", 10)
        ['the quick', 'brown fox']
        >>> wrap_line("tiny", 10)
        ['tiny']
        >>> wrap_line("a extraordinarily b", 5)
        ['a', 'extraordinarily', 'b']
    """

    if len(line) <= max_chars:
        return [line]
    words = line.split(" ")
    wrapped: List[str] = []
    current = words[0]
    for word in words[1:]:
        if len(current) + 1 + len(word) <= max_chars:
            current = f"{current} {word}"
        else:
            wrapped.append(current)
            current = word
    wrapped.append(current)
    return wrapped
