"""Layout data models: cell variants, table descriptions and the cursor."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union

from ward_reports.exceptions import LayoutError
from ward_reports.layout.styles import FONT_SIZES


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(str, Enum):
    TOP = "top"
    MIDDLE = "middle"


@dataclass(frozen=True)
class CellStyle:
    """Explicit per-cell style hints."""

    bold: bool = False
    align: Align = Align.LEFT
    valign: VAlign = VAlign.MIDDLE
    font_size: float = FONT_SIZES["body"]
    fill_color: Optional[str] = None
    text_color: Optional[str] = None


@dataclass(frozen=True)
class TextCell:
    """Ordinary body cell."""

    text: str
    col_span: int = 1
    style: CellStyle = field(default_factory=CellStyle)


@dataclass(frozen=True)
class HeaderCell:
    """Section banner cell, drawn with the accent fill and inverted text."""

    text: str
    col_span: int = 1
    style: CellStyle = field(
        default_factory=lambda: CellStyle(bold=True, font_size=FONT_SIZES["heading"])
    )


Cell = Union[TextCell, HeaderCell]


@dataclass(frozen=True)
class TableRow:
    cells: tuple[Cell, ...]

    @property
    def is_header(self) -> bool:
        return any(isinstance(c, HeaderCell) for c in self.cells)

    @property
    def span(self) -> int:
        return sum(c.col_span for c in self.cells)

    def texts(self) -> list[str]:
        return [c.text for c in self.cells]


@dataclass(frozen=True)
class TableDescription:
    """Ordered rows over a fixed number of columns.

    ``column_fractions`` splits the usable page width between the columns.
    """

    columns: int
    column_fractions: tuple[float, ...]
    rows: tuple[TableRow, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def validate(self) -> None:
        """Raise ``LayoutError`` unless every row spans exactly ``columns``."""
        if self.columns < 1:
            raise LayoutError(f"Table must declare at least one column, got {self.columns}")
        if len(self.column_fractions) != self.columns:
            raise LayoutError(
                f"Table declares {self.columns} columns but {len(self.column_fractions)} widths"
            )
        if abs(sum(self.column_fractions) - 1.0) > 1e-6:
            raise LayoutError(f"Column widths must sum to 1.0, got {sum(self.column_fractions):.4f}")
        for index, row in enumerate(self.rows):
            if not row.cells:
                raise LayoutError(f"Row {index} has no cells")
            if any(c.col_span < 1 for c in row.cells):
                raise LayoutError(f"Row {index} has a cell with col_span < 1")
            if row.span != self.columns:
                raise LayoutError(
                    f"Row {index} spans {row.span} columns, table declares {self.columns}"
                )


@dataclass(frozen=True)
class LayoutCursor:
    """Vertical offset from the page top on the current page (0-based index)."""

    y: float
    page_index: int = 0

    def advance(self, dy: float) -> LayoutCursor:
        return replace(self, y=self.y + dy)

    def on_new_page(self, top: float) -> LayoutCursor:
        return LayoutCursor(y=top, page_index=self.page_index + 1)
