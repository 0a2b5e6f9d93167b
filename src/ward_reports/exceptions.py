"""Exception hierarchy for ward-reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ward_reports.assembly.models import ReportFailure


class WardReportError(Exception):
    """Base exception for all ward-reports errors."""


class RecordValidationError(WardReportError):
    """A report record is missing fields required for layout."""

    def __init__(self, message: str, missing_fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing_fields = missing_fields or []


class NotesLookupError(WardReportError):
    """Fetching the notes for one record failed."""

    def __init__(self, message: str, record_id: str = "") -> None:
        super().__init__(message)
        self.record_id = record_id


class LayoutError(WardReportError):
    """Malformed table description, invalid cursor or illegal document phase."""


class FatalAssemblyError(WardReportError):
    """No record could be rendered; the document is not emitted."""

    def __init__(self, message: str, failures: list[ReportFailure] | None = None) -> None:
        super().__init__(message)
        self.failures = failures or []


class AssemblyCancelledError(WardReportError):
    """Assembly was cancelled before all records were processed."""


__all__ = [
    "WardReportError",
    "RecordValidationError",
    "NotesLookupError",
    "LayoutError",
    "FatalAssemblyError",
    "AssemblyCancelledError",
]
