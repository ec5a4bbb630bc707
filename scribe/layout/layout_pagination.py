"""Public pagination helpers for note pages."""

from __future__ import annotations

from typing import List

from .layout_constants import DEFAULT_FONT_SIZE, DEFAULT_LINE_HEIGHT
from .layout_flow import assemble_blocks, assemble_pages
from .layout_settings import LayoutMetrics


def paginate_text(
    document: str,
    font_size: float = DEFAULT_FONT_SIZE,
    line_height: float = DEFAULT_LINE_HEIGHT,
    *,
    metrics: LayoutMetrics | None = None,
) -> List[str]:
    """Split note text into page-sized chunks.

    Args:
        document: Note text using the heading/table/rule grammar.
        font_size: Font size in pixels.
        line_height: Line-height multiplier.
        metrics: Optional geometry and heuristic table.
    Returns:
        Page texts in order; an empty document yields ``[""]``.

    Example:
        >>> paginate_text("# Title\\n\\nSome short paragraph.", 22, 1.6)
        ['# Title\\n\\nSome short paragraph.']
        >>> paginate_text("")
        ['']
    """

    pages = assemble_pages(
        document, font_size=font_size, line_height=line_height, metrics=metrics
    )
    return [page.text() for page in pages]


__all__ = [
    "assemble_blocks",
    "assemble_pages",
    "paginate_text",
]
