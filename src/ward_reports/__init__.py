"""ward-reports: paginated clinical PDF reports for ward management.

Public API::

    from ward_reports import (
        AppSettings, ReportLayoutConfig,
        ReportRecord, Admission, Doctor, NoteEntry,
        DocumentAssembler, ReportOptions, AssemblyResult, artifact_name,
        MemoryNotesRepository, FileNotesRepository,
        FatalAssemblyError, LayoutError,
    )
"""

from __future__ import annotations

from ward_reports.assembly import (
    AssemblyResult,
    DocumentAssembler,
    FailureKind,
    ReportFailure,
    ReportOptions,
    artifact_name,
)
from ward_reports.core.config import AppSettings, ReportLayoutConfig
from ward_reports.exceptions import (
    AssemblyCancelledError,
    FatalAssemblyError,
    LayoutError,
    NotesLookupError,
    RecordValidationError,
    WardReportError,
)
from ward_reports.models import Admission, Doctor, NoteEntry, ReportRecord
from ward_reports.repositories import FileNotesRepository, INotesRepository, MemoryNotesRepository

__version__ = "0.1.0"

__all__ = [
    "Admission",
    "AppSettings",
    "AssemblyCancelledError",
    "AssemblyResult",
    "Doctor",
    "DocumentAssembler",
    "FailureKind",
    "FatalAssemblyError",
    "FileNotesRepository",
    "INotesRepository",
    "LayoutError",
    "MemoryNotesRepository",
    "NoteEntry",
    "NotesLookupError",
    "RecordValidationError",
    "ReportFailure",
    "ReportLayoutConfig",
    "ReportOptions",
    "ReportRecord",
    "WardReportError",
    "artifact_name",
]
