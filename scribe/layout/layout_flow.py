"""Page assembly: flow blocks onto pages against a height budget."""

from __future__ import annotations

from typing import List, Sequence

from ..models import Block, LineRole, NotePage, PageLine
from .layout_blocks import is_heading, segment_blocks
from .layout_constants import DEBUG_PAGINATION, EPSILON
from .layout_heights import UnitHeights
from .layout_settings import LayoutMetrics


def _debug(*, msg: str) -> None:
    """Log pagination debug output when enabled.

    Args:
        msg: Message to print.
    Returns:
        None.
    """

    if DEBUG_PAGINATION:
        print(msg)


class PageAssembler:
    """Greedy page filler over a block sequence.

    A unit that would push the current page past the budget seals the page
    first; a unit taller than a whole page still lands alone on a fresh page.
    Sealing an empty page does nothing, so no blank pages are emitted.
    """

    def __init__(self, heights: UnitHeights) -> None:
        self.heights = heights
        self.pages: List[NotePage] = []
        self.current = NotePage()

    def _overflows(self, height: float) -> bool:
        return self.current.height + height > self.heights.budget + EPSILON

    def seal(self) -> None:
        if self.current.is_empty:
            return
        _debug(
            msg=(
                f"[paginate] seal page {len(self.pages) + 1}: "
                f"{len(self.current.lines)} lines, "
                f"{self.current.height:.1f}/{self.heights.budget:.1f}px"
            )
        )
        self.pages.append(self.current)
        self.current = NotePage()

    def _append(
        self,
        text: str,
        height: float,
        *,
        role: LineRole = "content",
        source: int | None = None,
    ) -> None:
        self.current.lines.append(PageLine(text, role, source))
        self.current.height += height
        self.current.units += 1

    def place_unit(self, text: str, height: float, *, source: int) -> None:
        """Place a heading, rule or other atomic line."""

        if self._overflows(height):
            self.seal()
        self._append(text, height, source=source)

    def place_paragraph(self, line: str, *, source: int) -> None:
        """Place a paragraph one visual line at a time.

        Visual lines that land on the same page are kept together as one
        page line, so a paragraph is only cut where a page boundary falls.
        """

        open_line = False
        for visual in self.heights.visual_lines(line):
            if self._overflows(self.heights.line):
                self.seal()
                open_line = False
            if open_line:
                last = self.current.lines[-1]
                last.text = f"{last.text} {visual}"
                self.current.height += self.heights.line
                self.current.units += 1
            else:
                self._append(visual, self.heights.line, source=source)
                open_line = True

    def _needs_spacer(self) -> bool:
        if self.current.is_empty:
            return False
        return self.current.lines[-1].text.strip() != ""

    def place_table(self, block: Block) -> None:
        """Place table rows, repeating the header on continuation pages."""

        rows = block.lines
        row_height = self.heights.table_row
        table_height = self.heights.table_height(len(rows))
        needs_spacer = self._needs_spacer()
        spacer = self.heights.spacer if needs_spacer else 0.0
        if not self._overflows(spacer + table_height):
            if needs_spacer:
                self._append("", spacer, role="spacer")
            for offset, row in enumerate(rows):
                self.current.lines.append(PageLine(row, "content", block.start + offset))
            self.current.height += table_height
            self.current.units += 1
            return

        _debug(
            msg=(
                f"[paginate] split table at line {block.start}: "
                f"{len(rows)} rows, {table_height:.1f}px"
            )
        )
        if needs_spacer:
            if self._overflows(spacer):
                self.seal()
            else:
                self._append("", spacer, role="spacer")
        header = block.header
        for offset, row in enumerate(rows):
            if not self.current.is_empty and self._overflows(row_height):
                label = self._detach_label(block) if offset == 1 else None
                self.seal()
                if label is not None:
                    self._append(label.text, row_height, source=label.source)
                elif offset >= len(header):
                    for header_row in header:
                        self._append(header_row, row_height, role="repeated-header")
            self._append(row, row_height, source=block.start + offset)

    def _detach_label(self, block: Block) -> PageLine | None:
        """Pull a table's label row off the page so it moves with its separator."""

        if self.current.is_empty:
            return None
        last = self.current.lines[-1]
        if last.role != "content" or last.source != block.start:
            return None
        self.current.lines.pop()
        self.current.height -= self.heights.table_row
        self.current.units -= 1
        return last

    def place_block(self, block: Block) -> None:
        if block.kind == "table":
            self.place_table(block)
            return
        line = block.lines[0]
        if block.kind == "rule":
            self.place_unit(line, self.heights.rule, source=block.start)
        elif is_heading(line):
            self.place_unit(line, self.heights.heading, source=block.start)
        else:
            self.place_paragraph(line, source=block.start)

    def finish(self) -> List[NotePage]:
        self.seal()
        if not self.pages:
            self.pages.append(NotePage([PageLine("", "spacer")]))
        return self.pages


def assemble_pages(
    document: str,
    *,
    font_size: float,
    line_height: float,
    metrics: LayoutMetrics | None = None,
) -> List[NotePage]:
    """Lay out a document and return structured pages.

    Args:
        document: Note text using the heading/table/rule grammar.
        font_size: Font size in pixels.
        line_height: Line-height multiplier.
        metrics: Geometry and heuristic table; defaults to ``LayoutMetrics()``.
    Returns:
        At least one NotePage.
    """

    heights = UnitHeights.for_typography(
        metrics or LayoutMetrics(), font_size=font_size, line_height=line_height
    )
    return assemble_blocks(segment_blocks(document.split("\n")), heights=heights)


def assemble_blocks(blocks: Sequence[Block], *, heights: UnitHeights) -> List[NotePage]:
    """Flow pre-segmented blocks onto pages."""

    assembler = PageAssembler(heights)
    for block in blocks:
        assembler.place_block(block)
    return assembler.finish()
