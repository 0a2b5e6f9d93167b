"""Report assembly: the end-to-end pipeline from records to PDF bytes."""

from __future__ import annotations

from ward_reports.assembly.assembler import DocumentAssembler
from ward_reports.assembly.models import AssemblyResult, FailureKind, ReportFailure, ReportOptions
from ward_reports.assembly.naming import artifact_name

__all__ = [
    "AssemblyResult",
    "DocumentAssembler",
    "FailureKind",
    "ReportFailure",
    "ReportOptions",
    "artifact_name",
]
