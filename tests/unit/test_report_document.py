"""Tests for the report document, its phase machine and the footer pass."""

from __future__ import annotations

from datetime import datetime

import pytest

reportlab = pytest.importorskip("reportlab")

from ward_reports.exceptions import LayoutError  # noqa: E402
from ward_reports.layout.decorations import PageFooter, draw_title_header, scope_label  # noqa: E402
from ward_reports.layout.document import DocumentPhase, ReportDocument  # noqa: E402
from ward_reports.layout.models import LayoutCursor  # noqa: E402
from ward_reports.layout.styles import A4_GEOMETRY  # noqa: E402


class TestGeometry:
    def test_a4_values(self) -> None:
        assert A4_GEOMETRY.width == 595.28
        assert A4_GEOMETRY.height == 841.89
        assert A4_GEOMETRY.content_top == 20
        assert A4_GEOMETRY.content_bottom == pytest.approx(821.89)
        assert A4_GEOMETRY.usable_width == pytest.approx(571.28)


class TestPhaseMachine:
    def test_starts_header_pending(self) -> None:
        assert ReportDocument().phase == DocumentPhase.HEADER_PENDING

    def test_header_moves_to_sections(self) -> None:
        doc = ReportDocument()
        cursor = draw_title_header(doc, "Report", datetime(2024, 3, 15, 14, 30))
        assert doc.phase == DocumentPhase.SECTIONS
        assert cursor.page_index == 0
        assert cursor.y > A4_GEOMETRY.content_top

    def test_header_twice_rejected(self) -> None:
        doc = ReportDocument()
        draw_title_header(doc, "Report", datetime(2024, 3, 15))
        with pytest.raises(LayoutError):
            draw_title_header(doc, "Report", datetime(2024, 3, 15))

    def test_no_backward_transition(self) -> None:
        doc = ReportDocument()
        doc.advance_to(DocumentPhase.SECTIONS)
        with pytest.raises(LayoutError):
            doc.advance_to(DocumentPhase.HEADER_PENDING)

    def test_pages_closed_after_finalize(self) -> None:
        doc = ReportDocument()
        doc.finalize(PageFooter(year=2024))
        assert doc.phase == DocumentPhase.DONE
        with pytest.raises(LayoutError):
            doc.new_page(LayoutCursor(y=20))
        with pytest.raises(LayoutError):
            doc.canvas  # noqa: B018


class TestFooterPass:
    def test_every_page_stamped(self) -> None:
        doc = ReportDocument()
        cursor = LayoutCursor(y=20)
        cursor = doc.new_page(cursor)
        doc.new_page(cursor)

        content = doc.finalize(PageFooter(year=2024))

        assert content.startswith(b"%PDF")
        assert doc.page_count == 3
        assert [p.footer for p in doc.pages] == ["Page 1 of 3", "Page 2 of 3", "Page 3 of 3"]

    def test_footer_strings(self) -> None:
        footer = PageFooter(year=2024, company_name="St. Mary")
        assert footer.copyright == "© 2024 St. Mary. All rights reserved."
        assert footer.disclaimer == "This is a computer-generated document."
        assert PageFooter.page_label(2, 5) == "Page 2 of 5"


class TestScopeLabel:
    def test_specialty_wins(self) -> None:
        period = (datetime(2024, 1, 1), datetime(2024, 1, 31))
        assert scope_label("Cardiology", period) == "Specialty: Cardiology"

    def test_period(self) -> None:
        period = (datetime(2024, 1, 1), datetime(2024, 1, 31))
        assert scope_label(None, period) == "Period: 01/01/2024 to 31/01/2024"

    def test_none(self) -> None:
        assert scope_label() is None
