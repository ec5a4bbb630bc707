"""Measure real font advances to recalibrate the character-width heuristic."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from .layout_settings import LayoutMetrics

# Pangram plus punctuation; mixed case approximates running note text.
DEFAULT_SAMPLE = (
    "The quick brown fox jumps over the lazy dog. "
    "Pack my box with five dozen liquor jugs, 1234567890!"
)
MEASURE_SIZE = 100.0


def register_font(path: Path | str, name: str) -> str:
    """Register a TrueType font with ReportLab once.

    Args:
        path: Path to a ``.ttf`` file.
        name: Name to register the font under.
    Returns:
        The registered font name.
    """

    if name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(name, str(path)))
    return name


def average_char_width_ratio(font_name: str, *, sample: str = DEFAULT_SAMPLE) -> float:
    """Return the mean glyph advance of ``sample`` as a fraction of font size.

    Args:
        font_name: A standard PDF font or a name passed to ``register_font``.
        sample: Text to measure.
    Returns:
        Average advance divided by the font size.

    Example:
        >>> round(average_char_width_ratio("Courier"), 3)
        0.6
    """

    if not sample:
        raise ValueError("sample text must not be empty")
    width = pdfmetrics.stringWidth(sample, font_name, MEASURE_SIZE)
    return width / len(sample) / MEASURE_SIZE


def calibrated_metrics(
    metrics: LayoutMetrics, font_name: str, *, sample: str = DEFAULT_SAMPLE
) -> LayoutMetrics:
    """Return ``metrics`` with ``char_width_ratio`` measured from a font.

    Args:
        metrics: Metrics to copy.
        font_name: Registered font to measure.
        sample: Text to measure.
    Returns:
        New LayoutMetrics instance.
    """

    return replace(
        metrics, char_width_ratio=average_char_width_ratio(font_name, sample=sample)
    )
