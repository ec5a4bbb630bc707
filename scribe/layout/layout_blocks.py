"""Block segmentation and grammar probes for note documents."""

from __future__ import annotations

from typing import List, Sequence

from ..models import Block
from .layout_constants import HEADING_RE, RULE_RE, TABLE_DELIMITER


def is_table_row(line: str) -> bool:
    """Return True when the trimmed line starts a table row.

    Example:
        >>> is_table_row("  | a | b |")
        True
    """

    return line.strip().startswith(TABLE_DELIMITER)


def is_rule(line: str) -> bool:
    """Return True when the trimmed line is a horizontal rule marker.

    Example:
        >>> [is_rule(value) for value in ("---", " *** ", "-_-", "--")]
        [True, True, False, False]
    """

    return RULE_RE.match(line.strip()) is not None


def is_heading(line: str) -> bool:
    """Return True for ATX headings (``#`` to ``######`` then whitespace).

    Example:
        >>> [is_heading(value) for value in ("# Title", "#Title", "####### x")]
        [True, False, False]
    """

    return HEADING_RE.match(line) is not None


def segment_blocks(lines: Sequence[str]) -> List[Block]:
    """Partition document lines into table, rule and text blocks.

    Tables absorb every following line that is also a table row. Every
    other line, blank lines included, forms its own one-line block.

    Args:
        lines: Document lines in order.
    Returns:
        Blocks covering every line exactly once, in order.

    Example:
        >>> [(b.kind, len(b.lines)) for b in segment_blocks(["# T", "| a |", "| - |", "", "---"])]
        [('text', 1), ('table', 2), ('text', 1), ('rule', 1)]
    """

    blocks: List[Block] = []
    index = 0
    total = len(lines)
    while index < total:
        line = lines[index]
        if is_table_row(line):
            end = index + 1
            while end < total and is_table_row(lines[end]):
                end += 1
            blocks.append(Block("table", list(lines[index:end]), index))
            index = end
            continue
        kind = "rule" if is_rule(line) else "text"
        blocks.append(Block(kind, [line], index))
        index += 1
    return blocks
