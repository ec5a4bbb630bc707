"""Height estimates for the units placed on a page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..text import wrap_line
from .layout_blocks import is_heading
from .layout_settings import LayoutMetrics


@dataclass(slots=True, frozen=True)
class UnitHeights:
    """Pixel heights for one font size and line height.

    Example:
        >>> heights = UnitHeights.for_typography(LayoutMetrics(), font_size=20, line_height=1.5)
        >>> heights.line, heights.heading, heights.rule, heights.table_row
        (30.0, 45.0, 15.0, 30.0)
    """

    line: float
    heading: float
    rule: float
    table_row: float
    spacer: float
    chars_per_line: int
    budget: float

    @classmethod
    def for_typography(
        cls, metrics: LayoutMetrics, *, font_size: float, line_height: float
    ) -> "UnitHeights":
        """Derive unit heights from the metrics table.

        Args:
            metrics: Geometry and factor table.
            font_size: Font size in pixels.
            line_height: Line-height multiplier.
        Returns:
            UnitHeights for this typography.
        """

        px_per_line = metrics.px_per_line(font_size, line_height)
        return cls(
            line=px_per_line * metrics.text_line_factor,
            heading=px_per_line * metrics.heading_factor,
            rule=px_per_line * metrics.rule_factor,
            table_row=px_per_line * metrics.table_row_factor,
            spacer=px_per_line * metrics.spacer_factor,
            chars_per_line=metrics.chars_per_line(font_size),
            budget=metrics.available_height,
        )

    def visual_lines(self, line: str) -> List[str]:
        """Return the wrapped visual lines of a paragraph line."""
        return wrap_line(line, self.chars_per_line)

    def text_height(self, line: str) -> float:
        """Return the estimated height of a one-line text block.

        Headings count as a single taller unit; paragraphs cost one line
        per wrapped visual line.
        """

        if is_heading(line):
            return self.heading
        return self.line * len(self.visual_lines(line))

    def table_height(self, rows: int) -> float:
        return self.table_row * rows
