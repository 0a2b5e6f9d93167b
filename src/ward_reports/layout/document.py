"""Report document: a buffered reportlab canvas plus a page journal.

Pages are held in memory until :meth:`ReportDocument.finalize` so the footer
pass can stamp "Page X of Y" once the total is known.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
from typing import Any, Callable, Optional

from reportlab.pdfgen import canvas as rl_canvas

from ward_reports.exceptions import LayoutError
from ward_reports.layout.models import LayoutCursor
from ward_reports.layout.styles import A4_GEOMETRY, PageGeometry

log = logging.getLogger(__name__)

FooterStamp = Callable[[Any, int, int], str]


class DocumentPhase(str, Enum):
    """Assembly phases; transitions only move forward."""

    HEADER_PENDING = "header_pending"
    SECTIONS = "sections"
    FOOTER_PASS = "footer_pass"
    DONE = "done"


_PHASE_ORDER = list(DocumentPhase)


@dataclass
class DrawnRow:
    top: float
    bottom: float
    texts: list[str]
    header: bool = False
    fills: list[Optional[str]] = field(default_factory=list)


@dataclass
class PageLayout:
    """What was placed on one page, in drawing order."""

    index: int
    rows: list[DrawnRow] = field(default_factory=list)
    separators: list[float] = field(default_factory=list)
    footer: str = ""

    def cell_texts(self) -> list[list[str]]:
        return [row.texts for row in self.rows]


class _BufferedCanvas(rl_canvas.Canvas):
    """Canvas that keeps every page until the footer pass has run."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._saved_page_states: list[dict[str, Any]] = []

    def showPage(self) -> None:  # noqa: N802
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save_stamped(self, stamp: Callable[[Any, int, int], None]) -> None:
        """Replay buffered pages through *stamp*, then write the file."""
        self._saved_page_states.append(dict(self.__dict__))
        total = len(self._saved_page_states)
        for number, state in enumerate(self._saved_page_states, start=1):
            self.__dict__.update(state)
            stamp(self, number, total)
            rl_canvas.Canvas.showPage(self)
        rl_canvas.Canvas.save(self)


class ReportDocument:
    """One in-flight PDF. Not shared between assembly calls."""

    def __init__(
        self,
        geometry: PageGeometry = A4_GEOMETRY,
        *,
        title: str = "",
        invariant: bool = False,
    ) -> None:
        self.geometry = geometry
        self._buffer = BytesIO()
        self._canvas = _BufferedCanvas(
            self._buffer,
            pagesize=(geometry.width, geometry.height),
            invariant=1 if invariant else 0,
        )
        if title:
            self._canvas.setTitle(title)
        self._phase = DocumentPhase.HEADER_PENDING
        self._pages: list[PageLayout] = [PageLayout(index=0)]

    # ── State ────────────────────────────────────────────────────────

    @property
    def phase(self) -> DocumentPhase:
        return self._phase

    @property
    def canvas(self) -> Any:
        self.require_drawable()
        return self._canvas

    @property
    def page_index(self) -> int:
        return len(self._pages) - 1

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def pages(self) -> list[PageLayout]:
        return list(self._pages)

    @property
    def current_page(self) -> PageLayout:
        return self._pages[-1]

    def advance_to(self, phase: DocumentPhase) -> None:
        """Move forward to *phase*; moving backwards is a ``LayoutError``."""
        current = _PHASE_ORDER.index(self._phase)
        target = _PHASE_ORDER.index(phase)
        if target < current:
            raise LayoutError(f"Cannot move document from {self._phase.value} back to {phase.value}")
        self._phase = phase

    def require_drawable(self) -> None:
        if self._phase in (DocumentPhase.FOOTER_PASS, DocumentPhase.DONE):
            raise LayoutError(f"Document is in {self._phase.value}; content pages are closed")

    # ── Pages ────────────────────────────────────────────────────────

    def new_page(self, cursor: LayoutCursor) -> LayoutCursor:
        """Close the current page and return a cursor at the top of the next."""
        self.require_drawable()
        self._canvas.showPage()
        self._pages.append(PageLayout(index=len(self._pages)))
        log.debug("Started page %d", self.page_count)
        return cursor.on_new_page(self.geometry.content_top)

    def to_canvas_y(self, y: float) -> float:
        """Convert an offset from the page top to reportlab's bottom-up y."""
        return self.geometry.height - y

    # ── Journal ──────────────────────────────────────────────────────

    def record_row(
        self,
        top: float,
        bottom: float,
        texts: list[str],
        *,
        header: bool = False,
        fills: Optional[list[Optional[str]]] = None,
    ) -> None:
        self.current_page.rows.append(
            DrawnRow(top=top, bottom=bottom, texts=texts, header=header, fills=list(fills or []))
        )

    def record_separator(self, y: float) -> None:
        self.current_page.separators.append(y)

    # ── Footer pass ──────────────────────────────────────────────────

    def finalize(self, stamp: FooterStamp) -> bytes:
        """Stamp every page through *stamp* and return the PDF bytes.

        *stamp* draws on the canvas for page ``number`` of ``total`` and
        returns the footer label it drew.
        """
        self.advance_to(DocumentPhase.FOOTER_PASS)

        def _stamp(canv: Any, number: int, total: int) -> None:
            self._pages[number - 1].footer = stamp(canv, number, total)

        self._canvas.save_stamped(_stamp)
        self.advance_to(DocumentPhase.DONE)
        log.debug("Finalized document with %d pages", self.page_count)
        return self._buffer.getvalue()
