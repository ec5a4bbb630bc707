"""Page geometry and height heuristics used during pagination."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from .layout_constants import A4_HEIGHT_PX, A4_WIDTH_PX


@dataclass(slots=True, frozen=True)
class LayoutMetrics:
    """Geometry constants and per-element height factors.

    Height factors are multiples of one rendered line
    (``font_size * line_height``). ``char_width_ratio`` approximates the
    average glyph advance of the handwriting fonts as a fraction of the
    font size.

    Example:
        >>> metrics = LayoutMetrics()
        >>> metrics.available_height
        1083.0
        >>> metrics.chars_per_line(22)
        71
    """

    page_width: float = A4_WIDTH_PX
    page_height: float = A4_HEIGHT_PX
    # Text may run to 40px above the bottom edge; the sheet pads 48px.
    vertical_padding: float = 40.0
    # Ruled margin (~56px) on the left plus 48px on the right.
    horizontal_padding: float = 104.0
    char_width_ratio: float = 0.44
    text_line_factor: float = 1.0
    heading_factor: float = 1.5
    rule_factor: float = 0.5
    table_row_factor: float = 1.0
    spacer_factor: float = 1.0

    def __post_init__(self) -> None:
        if self.available_height <= 0:
            raise ValueError(
                f"vertical_padding {self.vertical_padding} leaves no room on a "
                f"{self.page_height}px page"
            )
        if self.usable_width <= 0:
            raise ValueError(
                f"horizontal_padding {self.horizontal_padding} leaves no room on a "
                f"{self.page_width}px page"
            )
        for name in (
            "char_width_ratio",
            "text_line_factor",
            "heading_factor",
            "rule_factor",
            "table_row_factor",
        ):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive number, got {value!r}")
        if not math.isfinite(self.spacer_factor) or self.spacer_factor < 0:
            raise ValueError(f"spacer_factor must be >= 0, got {self.spacer_factor!r}")

    @property
    def available_height(self) -> float:
        """Return the vertical budget for content on one page.

        Returns:
            Height in pixels.
        """

        return self.page_height - self.vertical_padding

    @property
    def usable_width(self) -> float:
        """Return the horizontal space available for a line of text.

        Returns:
            Width in pixels.
        """

        return self.page_width - self.horizontal_padding

    def px_per_line(self, font_size: float, line_height: float) -> float:
        """Return the height of one rendered line of body text."""

        _check_positive(name="font_size", value=font_size)
        _check_positive(name="line_height", value=line_height)
        return font_size * line_height

    def chars_per_line(self, font_size: float) -> int:
        """Return the estimated number of characters that fit on one line.

        Args:
            font_size: Font size in pixels.
        Returns:
            Character capacity, never below 1.
        """

        _check_positive(name="font_size", value=font_size)
        avg_char_width = font_size * self.char_width_ratio
        return max(1, math.floor(self.usable_width / avg_char_width))

    def with_overrides(self, overrides: Mapping[str, Any]) -> "LayoutMetrics":
        """Return a copy with selected fields replaced.

        Args:
            overrides: Field name to value mapping.
        Returns:
            New LayoutMetrics instance.

        Example:
            >>> LayoutMetrics().with_overrides({"vertical_padding": 96}).available_height
            1027.0
        """

        known = {item.name for item in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown layout metric(s): {', '.join(unknown)}")
        return replace(self, **{key: float(value) for key, value in overrides.items()})


def _check_positive(*, name: str, value: float) -> None:
    """Reject typography values that cannot produce a layout.

    Args:
        name: Parameter name used in the error message.
        value: Font size or line-height multiplier.
    Returns:
        None.
    """

    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive number, got {value!r}")


def load_metrics(path: Path | str, *, base: LayoutMetrics | None = None) -> LayoutMetrics:
    """Load metric overrides from a JSON object file.

    Args:
        path: JSON file with a flat object of field overrides.
        base: Metrics to apply the overrides to; defaults to ``LayoutMetrics()``.
    Returns:
        LayoutMetrics with the overrides applied.
    """

    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of layout metrics")
    return (base or LayoutMetrics()).with_overrides(data)
