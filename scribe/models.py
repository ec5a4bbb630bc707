"""
Typed containers for segmented notes and laid-out pages.
"""

from dataclasses import dataclass, field
from typing import List, Literal

BlockKind = Literal["table", "rule", "text"]
LineRole = Literal["content", "spacer", "repeated-header"]


@dataclass(slots=True)
class Block:
    """A run of contiguous document lines sharing one layout treatment.

    Attributes:
        kind: ``table`` for ``|`` rows, ``rule`` for horizontal rules,
            ``text`` for a single heading or paragraph line.
        lines: Original, untrimmed lines in document order.
        start: Index of the first line within the document.
    """

    kind: BlockKind
    lines: List[str]
    start: int

    @property
    def header(self) -> List[str]:
        """Return the label and separator rows of a table block.

        Example:
            >>> Block('table', ['| A |', '| --- |', '| 1 |'], 0).header
            ['| A |', '| --- |']
        """

        if self.kind != "table":
            return []
        return self.lines[:2]


@dataclass(slots=True)
class PageLine:
    """One line of page output and why it is there."""

    text: str
    role: LineRole = "content"
    source: int | None = None


@dataclass(slots=True)
class NotePage:
    """Lines assigned to a single page plus their estimated height."""

    lines: List[PageLine] = field(default_factory=list)
    height: float = 0.0
    units: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def text(self) -> str:
        """Return the page content handed to the renderer.

        Example:
            >>> NotePage([PageLine('# Title'), PageLine('body')]).text()
            '# Title\\nbody'
        """

        return "\n".join(line.text for line in self.lines)

    def content_lines(self) -> List[PageLine]:
        """Return lines that came from the document, skipping injected ones."""
        return [line for line in self.lines if line.role == "content"]
