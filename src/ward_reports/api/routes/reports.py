"""Report rendering endpoint."""

from __future__ import annotations

from datetime import datetime
from io import BytesIO
from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from ward_reports.assembly import DocumentAssembler, ReportOptions
from ward_reports.layout.styles import DEFAULT_REPORT_TITLE
from ward_reports.models import NoteEntry, ReportRecord
from ward_reports.repositories import MemoryNotesRepository

router = APIRouter(tags=["reports"])


class LongStayReportRequest(BaseModel):
    """Records to report on, with their notes keyed by record id."""

    records: list[ReportRecord] = Field(min_length=1)
    notes: dict[str, list[NoteEntry]] = Field(default_factory=dict)
    title: str = DEFAULT_REPORT_TITLE
    specialty: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    generated_at: Optional[datetime] = None
    include_overview: Optional[bool] = None


@router.post("/reports/long-stay")
async def long_stay_report(request: LongStayReportRequest, req: Request) -> StreamingResponse:
    """Render a long-stay PDF; per-record failures are counted in ``X-Report-Failures``."""
    if (request.start_date is None) != (request.end_date is None):
        raise HTTPException(status_code=422, detail="start_date and end_date must be given together")
    date_range = (
        (request.start_date, request.end_date)
        if request.start_date is not None and request.end_date is not None
        else None
    )

    pdf_config = req.app.state.settings.pdf
    if request.include_overview is not None:
        pdf_config = pdf_config.model_copy(update={"include_overview": request.include_overview})

    options = ReportOptions(
        title=request.title,
        specialty=request.specialty,
        date_range=date_range,
        generated_at=request.generated_at,
    )
    repository = MemoryNotesRepository(request.notes)
    result = await DocumentAssembler(pdf_config).assemble(request.records, repository, options)

    return StreamingResponse(
        BytesIO(result.content),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
            "X-Report-Failures": str(len(result.failures)),
            "X-Report-Pages": str(result.page_count),
        },
    )
