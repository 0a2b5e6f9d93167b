"""Title header (first page) and per-page footer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from reportlab.lib.colors import HexColor

from ward_reports.exceptions import LayoutError
from ward_reports.layout.document import DocumentPhase, ReportDocument
from ward_reports.layout.models import LayoutCursor
from ward_reports.layout.styles import (
    A4_GEOMETRY,
    BORDER_COLOR,
    FONT_SIZES,
    FOOTER_BASELINE_OFFSET,
    FOOTER_FONT_SIZE,
    FOOTER_RULE_OFFSET,
    FOOTER_TEXT_COLOR,
    HEADER_SPACING,
    RULE_LINE_WIDTH,
    SECTION_SPACING,
    TEXT_PRIMARY_COLOR,
    TEXT_SECONDARY_COLOR,
    PageGeometry,
)

DATE_FORMAT = "%d/%m/%Y"
DATETIME_FORMAT = "%d/%m/%Y %H:%M"


def draw_title_header(
    doc: ReportDocument,
    title: str,
    generated_at: datetime,
    subtitle: Optional[str] = None,
    *,
    font_family: str = "Helvetica",
) -> LayoutCursor:
    """Draw the first-page header and return the cursor below it.

    Moves the document from HEADER_PENDING into SECTIONS.
    """
    if doc.phase != DocumentPhase.HEADER_PENDING:
        raise LayoutError(f"Title header must come first; document is in {doc.phase.value}")

    geometry = doc.geometry
    canv = doc.canvas
    center_x = geometry.width / 2
    y = geometry.content_top + FONT_SIZES["title"]

    canv.saveState()
    canv.setFont(f"{font_family}-Bold", FONT_SIZES["title"])
    canv.setFillColor(HexColor(TEXT_PRIMARY_COLOR))
    canv.drawCentredString(center_x, doc.to_canvas_y(y), title)
    y += HEADER_SPACING

    if subtitle:
        canv.setFont(font_family, FONT_SIZES["subheading"])
        canv.setFillColor(HexColor(TEXT_SECONDARY_COLOR))
        canv.drawCentredString(center_x, doc.to_canvas_y(y), subtitle)
        y += HEADER_SPACING

    canv.setFont(font_family, FONT_SIZES["body"])
    canv.setFillColor(HexColor(TEXT_SECONDARY_COLOR))
    canv.drawCentredString(
        center_x,
        doc.to_canvas_y(y),
        f"Generated on: {generated_at.strftime(DATETIME_FORMAT)}",
    )
    y += HEADER_SPACING

    canv.setStrokeColor(HexColor(BORDER_COLOR))
    canv.setLineWidth(RULE_LINE_WIDTH)
    canv.line(
        geometry.margins.left,
        doc.to_canvas_y(y),
        geometry.width - geometry.margins.right,
        doc.to_canvas_y(y),
    )
    canv.restoreState()

    doc.advance_to(DocumentPhase.SECTIONS)
    return LayoutCursor(y=y + SECTION_SPACING, page_index=doc.page_index)


def scope_label(
    specialty: Optional[str] = None,
    date_range: Optional[tuple[datetime, datetime]] = None,
) -> Optional[str]:
    """Subtitle naming the report scope; a specialty wins over a period."""
    if specialty:
        return f"Specialty: {specialty}"
    if date_range:
        start, end = date_range
        return f"Period: {start.strftime(DATE_FORMAT)} to {end.strftime(DATE_FORMAT)}"
    return None


@dataclass(frozen=True)
class PageFooter:
    """Footer stamped on every page once the page total is known."""

    year: int
    company_name: str = "IMD-Care"
    disclaimer: str = "This is a computer-generated document."
    geometry: PageGeometry = A4_GEOMETRY
    font_family: str = "Helvetica"

    @staticmethod
    def page_label(number: int, total: int) -> str:
        return f"Page {number} of {total}"

    @property
    def copyright(self) -> str:
        return f"© {self.year} {self.company_name}. All rights reserved."

    def __call__(self, canv: Any, number: int, total: int) -> str:
        geo = self.geometry
        rule_y = FOOTER_RULE_OFFSET
        text_y = FOOTER_BASELINE_OFFSET
        label = self.page_label(number, total)

        canv.saveState()
        canv.setStrokeColor(HexColor(BORDER_COLOR))
        canv.setLineWidth(RULE_LINE_WIDTH)
        canv.line(geo.margins.left, rule_y, geo.width - geo.margins.right, rule_y)

        canv.setFont(self.font_family, FOOTER_FONT_SIZE)
        canv.setFillColor(HexColor(FOOTER_TEXT_COLOR))
        canv.drawCentredString(geo.width / 2, text_y, label)
        canv.drawString(geo.margins.left, text_y, self.copyright)
        canv.drawRightString(geo.width - geo.margins.right, text_y, self.disclaimer)
        canv.restoreState()
        return label
