"""
Split note files into page-sized chunks for the handwriting renderer.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Sequence

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tqdm import tqdm

from scribe.layout.layout_constants import DEFAULT_FONT_SIZE, DEFAULT_LINE_HEIGHT
from scribe.layout.layout_pagination import paginate_text
from scribe.layout.layout_settings import LayoutMetrics, load_metrics
from scribe.paste import html_to_note_text


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return CLI arguments for the pagination script."""

    parser = argparse.ArgumentParser(
        description="Paginate note text files into per-page chunks."
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="Note files (.txt/.md, or .html with --html).",
    )
    parser.add_argument(
        "--font-size",
        type=float,
        default=DEFAULT_FONT_SIZE,
        help="Font size in pixels.",
    )
    parser.add_argument(
        "--line-height",
        type=float,
        default=DEFAULT_LINE_HEIGHT,
        help="Line-height multiplier.",
    )
    parser.add_argument(
        "--metrics",
        type=Path,
        default=None,
        help="JSON file overriding layout metrics (paddings, factors, char width ratio).",
    )
    parser.add_argument(
        "--html",
        action="store_true",
        help="Treat inputs as rich-text HTML and convert them before paginating.",
    )
    parser.add_argument(
        "--format",
        choices=("json", "text"),
        default="json",
        help="Write one <stem>.pages.json, or one <stem>-page-N.txt per page.",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=Path("output/pages"),
        help="Directory into which page files are written.",
    )
    return parser.parse_args(argv)


def _read_note(path: Path, *, as_html: bool) -> str:
    """Return note text for an input file.

    Args:
        path: Input file.
        as_html: Whether to convert HTML markup into note text.
    Returns:
        Note text with ``\\n`` line endings.
    """

    raw = path.read_text(encoding="utf-8")
    if as_html:
        return html_to_note_text(raw)
    return raw.replace("\r\n", "\n").replace("\r", "\n")


def write_pages(
    *, pages: Sequence[str], stem: str, output_dir: Path, fmt: str
) -> List[Path]:
    """Write pages for one input and return the written paths.

    Args:
        pages: Page texts in order.
        stem: Base name for output files.
        output_dir: Target directory.
        fmt: ``json`` or ``text``.
    Returns:
        Paths of the files written.
    """

    output_dir.mkdir(parents=True, exist_ok=True)
    if fmt == "json":
        target = output_dir / f"{stem}.pages.json"
        target.write_text(json.dumps(list(pages), ensure_ascii=False, indent=2), encoding="utf-8")
        return [target]
    written: List[Path] = []
    for number, page in enumerate(pages, start=1):
        target = output_dir / f"{stem}-page-{number}.txt"
        target.write_text(page, encoding="utf-8")
        written.append(target)
    return written


def main(argv: Sequence[str] | None = None) -> None:
    """Paginate each input file and write its pages.

    Example:
        >>> main(["notes.md", "--format", "text"])  # doctest: +SKIP
    """

    args = _parse_args(argv)
    metrics = load_metrics(args.metrics) if args.metrics else LayoutMetrics()
    for path in tqdm(args.inputs, desc="Paginating notes", unit="file"):
        text = _read_note(path, as_html=args.html)
        pages = paginate_text(
            text,
            args.font_size,
            args.line_height,
            metrics=metrics,
        )
        written = write_pages(
            pages=pages,
            stem=path.stem,
            output_dir=args.output_dir,
            fmt=args.format,
        )
        tqdm.write(f"{path}: {len(pages)} page(s) -> {', '.join(str(p) for p in written)}")


if __name__ == "__main__":
    main()
