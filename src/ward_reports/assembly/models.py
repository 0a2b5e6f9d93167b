"""Assembly inputs and outputs."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from ward_reports.layout.document import PageLayout
from ward_reports.layout.styles import DEFAULT_REPORT_TITLE
from ward_reports.models import ReportRecord


class FailureKind(str, Enum):
    VALIDATION = "validation"
    LOOKUP = "lookup"
    LAYOUT = "layout"


@dataclass(frozen=True)
class ReportFailure:
    """A non-fatal, per-record problem reported alongside the document."""

    record_id: str
    label: str
    kind: FailureKind
    message: str

    @classmethod
    def for_record(cls, record: ReportRecord, kind: FailureKind, exc: BaseException) -> ReportFailure:
        return cls(
            record_id=record.record_id,
            label=record.label,
            kind=kind,
            message=str(exc) or type(exc).__name__,
        )

    def describe(self) -> str:
        return f"Record {self.label}: {self.message}"

    def to_dict(self) -> dict[str, str]:
        return {
            "record_id": self.record_id,
            "label": self.label,
            "kind": self.kind.value,
            "message": self.message,
        }


@dataclass
class ReportOptions:
    """Per-call presentation options.

    ``generated_at`` defaults to the current time; pass a fixed value for
    reproducible output.  Setting ``cancel_event`` stops further lookups.
    """

    title: str = DEFAULT_REPORT_TITLE
    report_kind: str = "long-stay-report"
    specialty: Optional[str] = None
    date_range: Optional[tuple[datetime, datetime]] = None
    generated_at: Optional[datetime] = None
    cancel_event: Optional[asyncio.Event] = None

    @property
    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()


@dataclass
class AssemblyResult:
    """A finished report plus everything that went wrong on the way."""

    content: bytes
    filename: str
    generated_at: datetime
    page_count: int
    rendered_record_ids: list[str] = field(default_factory=list)
    failures: list[ReportFailure] = field(default_factory=list)
    pages: list[PageLayout] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    def failures_of(self, kind: FailureKind) -> list[ReportFailure]:
        return [f for f in self.failures if f.kind == kind]

    def to_dict(self) -> dict[str, Any]:
        """Summary without the binary content."""
        return {
            "filename": self.filename,
            "generated_at": self.generated_at.isoformat(),
            "page_count": self.page_count,
            "rendered_record_ids": list(self.rendered_record_ids),
            "failures": [f.to_dict() for f in self.failures],
        }
