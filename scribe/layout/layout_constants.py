"""Shared constants for note layout and grammar probes."""

from __future__ import annotations

import os
import re

TABLE_DELIMITER = "|"
HEADING_RE = re.compile(r"^#{1,6}\s")
RULE_RE = re.compile(r"^(?:-{3,}|_{3,}|\*{3,})$")

# A4 at 96 dpi, matching the preview sheet.
A4_WIDTH_PX = 794.0
A4_HEIGHT_PX = 1123.0

DEFAULT_FONT_SIZE = 22.0
DEFAULT_LINE_HEIGHT = 1.6

DEBUG_PAGINATION = os.getenv("DEBUG_PAGINATION", "0") not in {
    "",
    "0",
    "false",
    "False",
}
EPSILON = 1e-4
