from typing import List

import pytest

from scribe.layout.layout_constants import EPSILON
from scribe.layout.layout_flow import assemble_pages
from scribe.layout.layout_pagination import paginate_text
from scribe.layout.layout_settings import LayoutMetrics
from scribe.models import NotePage

TABLE = "| A | B |\n| :--- | :--- |\n| 1 | 2 |"
# 14 four-letter words fill one 71-character visual line at 22px.
LINE_OF_WORDS = 14


def _words(lines: int) -> str:
    return " ".join(["abcd"] * (LINE_OF_WORDS * lines))


def _mixed_document() -> str:
    rows = "\n".join(f"| item {n} | value {n} |" for n in range(45))
    parts = [
        "# Biology notes",
        "",
        "Cells are the basic unit of life. " * 12,
        "## Organelles",
        "---",
        "| Part | Role |\n| --- | --- |\n" + rows,
        "Closing paragraph " * 40,
        "***",
        "### Key takeaways",
        "- membranes",
        "- energy",
        "",
        _words(30),
        "| X | Y |\n| - | - |\n| 1 | 2 |",
    ]
    return "\n".join(parts)


def _reconstruct(pages: List[NotePage]) -> List[str]:
    """Rebuild document lines from page content, rejoining split paragraphs."""

    lines: List[str] = []
    previous = None
    for page in pages:
        for line in page.content_lines():
            if previous is not None and line.source == previous:
                lines[-1] = f"{lines[-1]} {line.text}"
            else:
                lines.append(line.text)
            previous = line.source
    return lines


def test_short_note_is_one_page() -> None:
    document = "# Title\n\nSome short paragraph."

    assert paginate_text(document, 22, 1.6) == [document]


def test_empty_document_yields_one_empty_page() -> None:
    assert paginate_text("", 22, 1.6) == [""]
    assert paginate_text("", 9, 1.1) == [""]


def test_blank_only_document_keeps_its_lines() -> None:
    assert paginate_text("\n\n", 22, 1.6) == ["\n\n"]


def test_table_header_repeats_after_split() -> None:
    # 27 wrapped lines + spacer leave room for exactly two table rows.
    document = f"{_words(27)}\n{TABLE}"

    pages = paginate_text(document, 22, 1.6)

    assert len(pages) == 2
    assert pages[0] == f"{_words(27)}\n\n| A | B |\n| :--- | :--- |"
    assert pages[1] == TABLE


def test_label_row_moves_with_separator() -> None:
    # Only the label row would fit; it travels to the next page with its separator.
    document = f"{_words(28)}\n{TABLE}"

    pages = assemble_pages(document, font_size=22, line_height=1.6)

    assert [page.text() for page in pages] == [f"{_words(28)}\n", TABLE]
    assert [line.role for line in pages[1].lines] == ["content"] * 3


def test_table_that_fits_is_kept_whole_with_spacer() -> None:
    document = f"Intro line\n{TABLE}\nOutro"

    (page,) = assemble_pages(document, font_size=22, line_height=1.6)

    assert page.text() == f"Intro line\n\n{TABLE}\nOutro"
    assert [line.role for line in page.lines] == [
        "content",
        "spacer",
        "content",
        "content",
        "content",
        "content",
    ]


def test_no_spacer_after_existing_blank_line() -> None:
    document = f"Intro line\n\n{TABLE}"

    assert paginate_text(document, 22, 1.6) == [document]


def test_no_spacer_at_top_of_page() -> None:
    assert paginate_text(TABLE, 22, 1.6) == [TABLE]


def test_long_line_wraps_across_pages() -> None:
    document = " ".join(["word"] * 1000)
    assert len(document) == 4999

    pages = assemble_pages(document, font_size=36, line_height=1.6)
    metrics = LayoutMetrics()

    assert len(pages) > 1
    for page in pages:
        assert page.height <= metrics.available_height + EPSILON
        assert len(page.lines) == 1
    assert " ".join(page.text() for page in pages) == document


def test_long_table_repeats_header_on_every_continuation_page() -> None:
    header = ["| Term | Meaning |", "| :--- | :--- |"]
    rows = [f"| t{n} | m{n} |" for n in range(100)]
    document = "\n".join(["# Glossary", *header, *rows])

    pages = paginate_text(document, 22, 1.6)

    assert len(pages) >= 3
    assert pages[0].split("\n")[2:4] == header
    for page in pages[1:]:
        assert page.split("\n")[:2] == header
    body = [line for page in pages for line in page.split("\n") if line not in header]
    assert body[:2] == ["# Glossary", ""]
    assert body[2:] == rows


@pytest.mark.parametrize(
    ("font_size", "line_height"),
    [(12, 1.2), (16, 1.5), (22, 1.6), (28, 1.8), (40, 2.0)],
)
def test_content_is_preserved(font_size: float, line_height: float) -> None:
    document = _mixed_document()

    pages = assemble_pages(document, font_size=font_size, line_height=line_height)

    assert _reconstruct(pages) == document.split("\n")


@pytest.mark.parametrize("font_size", [12, 18, 22, 30, 44])
def test_pages_respect_budget(font_size: float) -> None:
    metrics = LayoutMetrics()

    pages = assemble_pages(_mixed_document(), font_size=font_size, line_height=1.6)

    for page in pages:
        assert page.height <= metrics.available_height + EPSILON or page.units == 1


@pytest.mark.parametrize("font_size", [14, 22, 30])
def test_continuation_pages_start_with_table_header(font_size: float) -> None:
    pages = assemble_pages(_mixed_document(), font_size=font_size, line_height=1.6)

    for page in pages:
        repeated = [line for line in page.lines if line.role == "repeated-header"]
        if repeated:
            assert page.lines[:2] == repeated
            assert [line.text for line in repeated] in (
                ["| Part | Role |", "| --- | --- |"],
                ["| X | Y |", "| - | - |"],
            )


def test_oversized_unit_is_placed_alone() -> None:
    metrics = LayoutMetrics(page_height=100.0, vertical_padding=10.0)
    document = "# Huge heading\nbody"

    pages = assemble_pages(document, font_size=50, line_height=1.6, metrics=metrics)

    assert [page.text() for page in pages] == ["# Huge heading", "body"]
    assert pages[0].height > metrics.available_height
    assert pages[0].units == 1


def test_tiny_page_still_terminates_with_tables() -> None:
    metrics = LayoutMetrics(page_height=60.0, vertical_padding=10.0)
    document = "| A |\n| - |\n| 1 |\n| 2 |"

    pages = paginate_text(document, 20, 1.5, metrics=metrics)

    # the label row never sits alone without its separator
    assert pages == [
        "| A |\n| - |",
        "| A |\n| - |\n| 1 |",
        "| A |\n| - |\n| 2 |",
    ]


def test_exact_fit_counts_as_fitting() -> None:
    metrics = LayoutMetrics(page_height=140.0, vertical_padding=40.0)
    document = "\n".join(["line"] * 5)

    # five 20px lines on a 100px budget
    assert paginate_text(document, 20, 1.0, metrics=metrics) == [document]
    assert len(paginate_text(document + "\nline", 20, 1.0, metrics=metrics)) == 2


def test_single_pages_are_stable_when_repaginated() -> None:
    for font_size in (14, 22, 30):
        for page in paginate_text(_mixed_document(), font_size, 1.6):
            assert paginate_text(page, font_size, 1.6) == [page]


def test_page_count_never_drops_as_font_grows() -> None:
    document = "\n".join(
        [
            "# Lecture 4",
            "Photosynthesis converts light energy into chemical energy. " * 20,
            "---",
            "## Light reactions",
            "Occur in the thylakoid membranes and produce ATP and NADPH. " * 15,
            "",
            "## Calvin cycle",
            "Fixes carbon dioxide into sugars using the products above. " * 25,
        ]
    )

    counts = [len(paginate_text(document, size, 1.6)) for size in range(10, 62, 2)]

    assert counts == sorted(counts)
    assert counts[-1] > counts[0]


def test_results_are_deterministic() -> None:
    document = _mixed_document()

    assert paginate_text(document, 22, 1.6) == paginate_text(document, 22, 1.6)


@pytest.mark.parametrize(
    ("font_size", "line_height"),
    [(0, 1.6), (-4, 1.6), (22, 0), (22, -1), (float("nan"), 1.6), (22, float("inf"))],
)
def test_invalid_typography_is_rejected(font_size: float, line_height: float) -> None:
    with pytest.raises(ValueError):
        paginate_text("text", font_size, line_height)
