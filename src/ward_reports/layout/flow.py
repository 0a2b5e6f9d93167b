"""Page flow engine: measures table rows and places them on pages.

This engine is the only page-break authority for report sections.  Rows are
atomic: a row that does not fit below the cursor moves, whole, to a new page.
A cell never wraps to more lines than one page can hold; the excess is cut
and the last kept line ends with "...".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from reportlab.lib.colors import HexColor
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

from ward_reports.exceptions import LayoutError
from ward_reports.layout.document import ReportDocument
from ward_reports.layout.models import (
    Align,
    Cell,
    HeaderCell,
    LayoutCursor,
    TableDescription,
    TableRow,
    VAlign,
)
from ward_reports.layout.styles import (
    A4_GEOMETRY,
    ALT_ROW_BG_COLOR,
    BORDER_COLOR,
    CELL_PADDING,
    GRID_LINE_WIDTH,
    HEADER_TEXT_COLOR,
    LINE_HEIGHT_FACTOR,
    MIN_CELL_HEIGHT,
    PRIMARY_COLOR,
    SECTION_SPACING,
    SEPARATOR_LINE_WIDTH,
    TEXT_PRIMARY_COLOR,
    PageGeometry,
)
from ward_reports.layout.text import TRUNCATION_MARKER, sanitize_text

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeasuredCell:
    cell: Cell
    x: float
    width: float
    font: str
    lines: tuple[str, ...]


@dataclass(frozen=True)
class MeasuredRow:
    row: TableRow
    cells: tuple[MeasuredCell, ...]
    height: float


class PageFlowEngine:
    """Draws ``TableDescription`` rows onto a ``ReportDocument``."""

    def __init__(
        self,
        geometry: PageGeometry = A4_GEOMETRY,
        *,
        font_family: str = "Helvetica",
        section_spacing: float = SECTION_SPACING,
        cell_padding: float = CELL_PADDING,
        min_cell_height: float = MIN_CELL_HEIGHT,
    ) -> None:
        self.geometry = geometry
        self._font = font_family
        self._font_bold = f"{font_family}-Bold"
        self._section_spacing = section_spacing
        self._padding = cell_padding
        self._min_cell_height = min_cell_height

    # ── Public API ───────────────────────────────────────────────────

    def render_table(
        self,
        doc: ReportDocument,
        table: TableDescription,
        cursor: LayoutCursor,
    ) -> LayoutCursor:
        """Draw *table* starting at *cursor* and return the cursor below it.

        Validation and measurement happen before anything is drawn, so a
        ``LayoutError`` leaves the document untouched.
        """
        if table.is_empty:
            return cursor

        self._check_cursor(doc, cursor)
        table.validate()
        measured = self.measure_rows(table)

        body_index = 0
        for row in measured:
            if cursor.y + row.height > self.geometry.content_bottom:
                log.debug(
                    "Row of height %.1f overflows page %d at y=%.1f; breaking",
                    row.height, cursor.page_index + 1, cursor.y,
                )
                cursor = doc.new_page(cursor)

            tinted = False
            if not row.row.is_header:
                tinted = body_index % 2 == 1
                body_index += 1

            self._draw_row(doc, row, cursor.y, tinted=tinted)
            cursor = cursor.advance(row.height)

        return cursor.advance(self._section_spacing)

    def render_separator_line(self, doc: ReportDocument, y: float) -> bool:
        """Draw a horizontal rule at *y* if it lies inside the printable range.

        Returns False, without touching the document, when *y* is outside
        the top/bottom margins.
        """
        if not (self.geometry.content_top <= y <= self.geometry.content_bottom):
            log.debug("Separator at y=%.1f outside printable range, skipped", y)
            return False

        canv = doc.canvas
        canv.saveState()
        canv.setStrokeColor(HexColor(BORDER_COLOR))
        canv.setLineWidth(SEPARATOR_LINE_WIDTH)
        canvas_y = doc.to_canvas_y(y)
        canv.line(
            self.geometry.margins.left,
            canvas_y,
            self.geometry.width - self.geometry.margins.right,
            canvas_y,
        )
        canv.restoreState()
        doc.record_separator(y)
        return True

    def ensure_space(
        self,
        doc: ReportDocument,
        cursor: LayoutCursor,
        needed: float,
    ) -> LayoutCursor:
        """Start a new page unless *needed* units remain below *cursor*."""
        self._check_cursor(doc, cursor)
        if cursor.y <= self.geometry.content_top:
            return cursor
        if cursor.y + needed > self.geometry.content_bottom:
            return doc.new_page(cursor)
        return cursor

    def measure_rows(self, table: TableDescription) -> list[MeasuredRow]:
        """Wrap every cell and compute row heights for *table*."""
        usable = self.geometry.usable_width
        widths = [usable * f for f in table.column_fractions]
        rows: list[MeasuredRow] = []

        for row in table.rows:
            x = self.geometry.margins.left
            column = 0
            cells: list[MeasuredCell] = []
            height = self._min_cell_height
            for cell in row.cells:
                width = sum(widths[column:column + cell.col_span])
                font = self._font_bold if cell.style.bold or isinstance(cell, HeaderCell) else self._font
                size = cell.style.font_size
                inner = width - 2 * self._padding
                lines = self._clip(self._wrap(cell.text, font, size, inner), font, size, inner)
                cells.append(MeasuredCell(cell=cell, x=x, width=width, font=font, lines=lines))
                height = max(height, self._text_height(lines, size))
                x += width
                column += cell.col_span

            rows.append(MeasuredRow(row=row, cells=tuple(cells), height=height))

        return rows

    def max_lines(self, font_size: float) -> int:
        """Wrapped lines of *font_size* text that fit in one cell on an empty page."""
        available = self.geometry.usable_height - 2 * self._padding
        return max(1, int(available // (font_size * LINE_HEIGHT_FACTOR)))

    # ── Internals ────────────────────────────────────────────────────

    def _check_cursor(self, doc: ReportDocument, cursor: LayoutCursor) -> None:
        doc.require_drawable()
        if cursor.y < 0:
            raise LayoutError(f"Invalid cursor offset {cursor.y}")
        if cursor.page_index != doc.page_index:
            raise LayoutError(
                f"Cursor is on page {cursor.page_index} but the document is on page {doc.page_index}"
            )

    @staticmethod
    def _wrap(text: str, font: str, size: float, max_width: float) -> tuple[str, ...]:
        out: list[str] = []
        for paragraph in sanitize_text(text).split("\n"):
            paragraph = paragraph.rstrip()
            if not paragraph:
                out.append("")
                continue
            for line in simpleSplit(paragraph, font, size, max_width) or [""]:
                out.extend(_break_wide_line(line, font, size, max_width))
        return tuple(out) or ("",)

    def _clip(self, lines: tuple[str, ...], font: str, size: float, max_width: float) -> tuple[str, ...]:
        limit = self.max_lines(size)
        if len(lines) <= limit:
            return lines
        log.debug("Cell wraps to %d lines; keeping %d", len(lines), limit)
        kept = list(lines[:limit])
        last = kept[-1].rstrip()
        while last and stringWidth(last + TRUNCATION_MARKER, font, size) > max_width:
            last = last[:-1].rstrip()
        kept[-1] = last + TRUNCATION_MARKER
        return tuple(kept)

    def _text_height(self, lines: tuple[str, ...], size: float) -> float:
        return len(lines) * size * LINE_HEIGHT_FACTOR + 2 * self._padding

    def _draw_row(self, doc: ReportDocument, row: MeasuredRow, top: float, *, tinted: bool) -> None:
        canv = doc.canvas
        header = row.row.is_header
        bottom_canvas_y = doc.to_canvas_y(top + row.height)
        fills: list[Optional[str]] = []

        for mc in row.cells:
            style = mc.cell.style
            fill: Optional[str]
            if header:
                fill = PRIMARY_COLOR
            elif style.fill_color:
                fill = style.fill_color
            elif tinted:
                fill = ALT_ROW_BG_COLOR
            else:
                fill = None
            fills.append(fill)

            canv.saveState()
            canv.setStrokeColor(HexColor(BORDER_COLOR))
            canv.setLineWidth(GRID_LINE_WIDTH)
            if fill:
                canv.setFillColor(HexColor(fill))
            canv.rect(mc.x, bottom_canvas_y, mc.width, row.height, fill=1 if fill else 0, stroke=1)

            text_color = HEADER_TEXT_COLOR if header else (style.text_color or TEXT_PRIMARY_COLOR)
            canv.setFillColor(HexColor(text_color))
            canv.setFont(mc.font, style.font_size)

            leading = style.font_size * LINE_HEIGHT_FACTOR
            block = len(mc.lines) * leading
            if style.valign == VAlign.TOP:
                first = top + self._padding + style.font_size
            else:
                first = top + (row.height - block) / 2 + style.font_size
            for i, line in enumerate(mc.lines):
                baseline = doc.to_canvas_y(first + i * leading)
                if style.align == Align.CENTER:
                    canv.drawCentredString(mc.x + mc.width / 2, baseline, line)
                elif style.align == Align.RIGHT:
                    canv.drawRightString(mc.x + mc.width - self._padding, baseline, line)
                else:
                    canv.drawString(mc.x + self._padding, baseline, line)
            canv.restoreState()

        doc.record_row(top, top + row.height, row.row.texts(), header=header, fills=fills)


def _break_wide_line(line: str, font: str, size: float, max_width: float) -> list[str]:
    """Split *line* character by character where a single word is wider than *max_width*."""
    if stringWidth(line, font, size) <= max_width:
        return [line]
    pieces: list[str] = []
    current = ""
    for char in line:
        if current and stringWidth(current + char, font, size) > max_width:
            pieces.append(current)
            current = char
        else:
            current += char
    pieces.append(current)
    return pieces
