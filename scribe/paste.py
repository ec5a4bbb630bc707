"""
Convert pasted rich text (HTML) into note text.

The output uses the same grammar the paginator and the page renderer read:
ATX headings, GFM pipe tables, ``---`` rules, ``-``/``1.`` list items and
plain paragraphs separated by blank lines.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .cleaning import clean_note_text, collapse_spaces

HEADING_TAGS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}
CONTAINER_TAGS = {
    "article",
    "body",
    "div",
    "footer",
    "header",
    "html",
    "main",
    "section",
}
BLOCK_TAGS = (
    set(HEADING_TAGS)
    | CONTAINER_TAGS
    | {"blockquote", "hr", "ol", "p", "pre", "table", "ul"}
)
DROPPED_TAGS = ["head", "meta", "script", "style", "title"]


def _wrap_marker(inner: str, marker: str) -> str:
    """Wrap inline text in an emphasis marker, keeping outer spaces outside.

    Example:
        >>> _wrap_marker(" key term ", "**")
        ' **key term** '
    """

    stripped = inner.strip()
    if not stripped:
        return inner
    lead = " " if inner[:1].isspace() else ""
    trail = " " if inner[-1:].isspace() else ""
    return f"{lead}{marker}{stripped}{marker}{trail}"


def _inline(node: Tag) -> str:
    """Return inline Markdown for the children of ``node``."""

    parts: List[str] = []
    for child in node.children:
        if isinstance(child, PreformattedString):
            continue
        if isinstance(child, NavigableString):
            parts.append(collapse_spaces(str(child)))
            continue
        if not isinstance(child, Tag):
            continue
        name = child.name
        if name == "br":
            parts.append("\n")
        elif name in {"strong", "b"}:
            parts.append(_wrap_marker(_inline(child), "**"))
        elif name in {"em", "i"}:
            parts.append(_wrap_marker(_inline(child), "*"))
        elif name == "code":
            parts.append(_wrap_marker(child.get_text(), "`"))
        elif name == "a" and child.get("href"):
            text = _inline(child).strip()
            parts.append(f"[{text}]({child['href']})" if text else "")
        elif name in BLOCK_TAGS or name == "li":
            parts.append(f" {_inline(child)} ")
        else:
            parts.append(_inline(child))
    return "".join(parts)


def _paragraph(node: Tag) -> str:
    lines = (line.strip() for line in _inline(node).split("\n"))
    return "\n".join(line for line in lines if line)


def _list(node: Tag, *, depth: int = 0) -> List[str]:
    """Return list item lines, nesting sub-lists two spaces deeper."""

    ordered = node.name == "ol"
    try:
        number = int(node.get("start", 1))
    except (TypeError, ValueError):
        number = 1
    indent = "  " * depth
    lines: List[str] = []
    for item in node.find_all("li", recursive=False):
        nested = [child for child in item.children if isinstance(child, Tag) and child.name in {"ul", "ol"}]
        for child in nested:
            child.extract()
        marker = f"{number}." if ordered else "-"
        text = " ".join(_paragraph(item).split("\n"))
        lines.append(f"{indent}{marker} {text}".rstrip())
        for child in nested:
            lines.extend(_list(child, depth=depth + 1))
        number += 1
    return lines


def _cell(cell: Tag) -> str:
    text = " ".join(_paragraph(cell).split("\n"))
    return text.replace("|", "\\|")


def _table(node: Tag) -> str:
    """Return a GFM pipe table; the first row becomes the header."""

    rows: List[List[str]] = []
    for row in node.find_all("tr"):
        cells = [_cell(cell) for cell in row.find_all(["th", "td"], recursive=False)]
        if cells:
            rows.append(cells)
    if not rows:
        return ""
    width = max(len(cells) for cells in rows)
    lines: List[str] = []
    for index, cells in enumerate(rows):
        padded = cells + [""] * (width - len(cells))
        lines.append("| " + " | ".join(padded) + " |")
        if index == 0:
            lines.append("| " + " | ".join(["---"] * width) + " |")
    return "\n".join(lines)


def _blocks(node: Tag) -> List[str]:
    """Return Markdown blocks for ``node`` in document order."""

    blocks: List[str] = []
    pending: List[NavigableString | Tag] = []

    def flush() -> None:
        if not pending:
            return
        holder = BeautifulSoup("", "html.parser").new_tag("p")
        for item in pending:
            holder.append(item)
        pending.clear()
        text = _paragraph(holder)
        if text:
            blocks.append(text)

    for child in list(node.children):
        if isinstance(child, PreformattedString):
            continue
        if not isinstance(child, Tag) or child.name not in BLOCK_TAGS:
            pending.append(child.extract() if isinstance(child, Tag) else NavigableString(str(child)))
            continue
        flush()
        name = child.name
        if name in HEADING_TAGS:
            text = " ".join(_paragraph(child).split("\n"))
            if text:
                blocks.append(f"{'#' * HEADING_TAGS[name]} {text}")
        elif name == "p":
            text = _paragraph(child)
            if text:
                blocks.append(text)
        elif name in {"ul", "ol"}:
            lines = _list(child)
            if lines:
                blocks.append("\n".join(lines))
        elif name == "table":
            table = _table(child)
            if table:
                blocks.append(table)
        elif name == "hr":
            blocks.append("---")
        elif name == "pre":
            code = child.get_text().strip("\n")
            blocks.append(f"```\n{code}\n```")
        elif name == "blockquote":
            quoted = "\n\n".join(_blocks(child))
            if quoted:
                blocks.append("\n".join(f"> {line}".rstrip() for line in quoted.split("\n")))
        else:
            blocks.extend(_blocks(child))
    flush()
    return blocks


def html_to_note_text(html: str) -> str:
    """Convert an HTML fragment from the clipboard into note text.

    Args:
        html: Clipboard ``text/html`` payload.
    Returns:
        Note text with blocks separated by one blank line.

    Example:
        >>> html_to_note_text("<h2>Cells</h2><p>The <b>nucleus</b> holds DNA.</p>")
        '## Cells\\n\\nThe **nucleus** holds DNA.'
    """

    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(DROPPED_TAGS):
        tag.decompose()
    return clean_note_text("\n\n".join(_blocks(soup)))


def splice_paste(
    text: str,
    start: int,
    end: int,
    *,
    html: str | None = None,
    plain: str = "",
) -> str:
    """Replace the selection ``text[start:end]`` with pasted content.

    Rich text is converted and padded with blank lines so it stays separate
    from the surrounding blocks; without usable HTML the plain text is
    inserted as-is.

    Args:
        text: Current editor text.
        start: Selection start offset.
        end: Selection end offset.
        html: Clipboard ``text/html`` payload, if any.
        plain: Clipboard ``text/plain`` payload.
    Returns:
        The edited text.

    Example:
        >>> splice_paste("ab", 1, 1, html="<hr>")
        'a\\n\\n---\\n\\nb'
    """

    start = max(0, min(start, len(text)))
    end = max(start, min(end, len(text)))
    converted = html_to_note_text(html) if html else ""
    insert = f"\n\n{converted}\n\n" if converted else plain
    return text[:start] + insert + text[end:]
