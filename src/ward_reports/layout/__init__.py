"""Paginated layout: geometry, table descriptions, page flow and decorations."""

from __future__ import annotations

from ward_reports.layout.decorations import PageFooter, draw_title_header, scope_label
from ward_reports.layout.document import DocumentPhase, PageLayout, ReportDocument
from ward_reports.layout.flow import PageFlowEngine
from ward_reports.layout.models import (
    Align,
    CellStyle,
    HeaderCell,
    LayoutCursor,
    TableDescription,
    TableRow,
    TextCell,
    VAlign,
)
from ward_reports.layout.styles import A4_GEOMETRY, PageGeometry

__all__ = [
    "A4_GEOMETRY",
    "Align",
    "CellStyle",
    "DocumentPhase",
    "HeaderCell",
    "LayoutCursor",
    "PageFlowEngine",
    "PageFooter",
    "PageGeometry",
    "PageLayout",
    "ReportDocument",
    "TableDescription",
    "TableRow",
    "TextCell",
    "VAlign",
    "draw_title_header",
    "scope_label",
]
