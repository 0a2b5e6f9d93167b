"""Centralized page geometry and style constants for PDF reports."""

from __future__ import annotations

from dataclasses import dataclass

# ── Page geometry ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Margins:
    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True)
class PageGeometry:
    """Fixed page size and margins, in PDF user units (points)."""

    width: float
    height: float
    margins: Margins

    @property
    def usable_width(self) -> float:
        return self.width - self.margins.left - self.margins.right

    @property
    def content_top(self) -> float:
        return self.margins.top

    @property
    def content_bottom(self) -> float:
        """Lowest offset from the page top that content may reach."""
        return self.height - self.margins.bottom

    @property
    def usable_height(self) -> float:
        return self.content_bottom - self.content_top


# ISO A4 in points
A4_GEOMETRY = PageGeometry(
    width=595.28,
    height=841.89,
    margins=Margins(top=20, right=12, bottom=20, left=12),
)

# ── Fonts ────────────────────────────────────────────────────────────

FONT_SIZES: dict[str, float] = {
    "title": 14,
    "heading": 12,
    "subheading": 10,
    "body": 12,
    "small": 10,
}

LINE_HEIGHT_FACTOR = 1.2

# ── Color palette (hex strings) ──────────────────────────────────────
# Kept as plain hex so the renderer converts to reportlab HexColor at draw time.

PRIMARY_COLOR = "#4F46E5"          # Indigo-600
HEADER_TEXT_COLOR = "#FFFFFF"
TEXT_PRIMARY_COLOR = "#1F2937"     # Gray-800
TEXT_SECONDARY_COLOR = "#4B5563"   # Gray-600
FOOTER_TEXT_COLOR = "#9CA3AF"      # Gray-400
BORDER_COLOR = "#E5E7EB"           # Gray-200
ALT_ROW_BG_COLOR = "#F9FAFB"       # Gray-50

# ── Spacing ──────────────────────────────────────────────────────────

HEADER_SPACING = 15
SECTION_SPACING = 10
CELL_PADDING = 5
MIN_CELL_HEIGHT = 12
GRID_LINE_WIDTH = 0.1
RULE_LINE_WIDTH = 0.5
SEPARATOR_LINE_WIDTH = 0.1
SEPARATOR_OFFSET = 3

# Footer sits inside the bottom margin
FOOTER_RULE_OFFSET = 16
FOOTER_BASELINE_OFFSET = 7
FOOTER_FONT_SIZE = 8

# ── Table column layouts (fractions of usable width) ─────────────────

INFO_COLUMN_FRACTIONS: tuple[float, ...] = (0.16, 0.34, 0.16, 0.34)
NOTES_COLUMN_FRACTIONS: tuple[float, ...] = (0.18, 0.27, 0.275, 0.275)
OVERVIEW_COLUMN_FRACTIONS: tuple[float, ...] = (0.22, 0.13, 0.17, 0.20, 0.14, 0.14)

# ── Section titles ───────────────────────────────────────────────────

PATIENT_INFO_TITLE = "Patient Information"
CLINICAL_NOTES_TITLE = "Clinical Notes"
OVERVIEW_TITLE = "Long Stay Patients"
DEFAULT_REPORT_TITLE = "Long Stay Patient Report"
