"""
Measure a font's average glyph width to recalibrate the line-capacity heuristic.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from scribe.layout.font_metrics import DEFAULT_SAMPLE, calibrated_metrics, register_font
from scribe.layout.layout_constants import DEFAULT_FONT_SIZE
from scribe.layout.layout_settings import LayoutMetrics


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return CLI arguments for the calibration script."""

    parser = argparse.ArgumentParser(
        description="Print the char_width_ratio measured for a font."
    )
    parser.add_argument(
        "--font-name",
        required=True,
        help="Standard PDF font name, or the name to register --font-path under.",
    )
    parser.add_argument(
        "--font-path",
        type=Path,
        default=None,
        help="Optional .ttf file to register before measuring.",
    )
    parser.add_argument(
        "--sample",
        default=DEFAULT_SAMPLE,
        help="Text whose average advance is measured.",
    )
    parser.add_argument(
        "--font-size",
        type=float,
        default=DEFAULT_FONT_SIZE,
        help="Font size used to report the resulting characters per line.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> dict:
    """Measure the font and print the calibration report as JSON.

    Example:
        >>> main(["--font-name", "Courier"])["char_width_ratio"]  # doctest: +SKIP
        0.6
    """

    args = _parse_args(argv)
    if args.font_path is not None:
        register_font(args.font_path, args.font_name)
    metrics = calibrated_metrics(LayoutMetrics(), args.font_name, sample=args.sample)
    report = {
        "font_name": args.font_name,
        "char_width_ratio": round(metrics.char_width_ratio, 4),
        "chars_per_line": metrics.chars_per_line(args.font_size),
        "font_size": args.font_size,
    }
    print(json.dumps(report, indent=2))
    return report


if __name__ == "__main__":
    main()
