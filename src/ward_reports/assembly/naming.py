"""Artifact naming: ``<report-kind>-<DD-MM-YYYY-HHmm>.<ext>``."""

from __future__ import annotations

from datetime import datetime

ARTIFACT_TIMESTAMP_FORMAT = "%d-%m-%Y-%H%M"


def artifact_name(report_kind: str, generated_at: datetime, ext: str = "pdf") -> str:
    """Return the file name for a report generated at *generated_at*.

    >>> artifact_name("long-stay-report", datetime(2024, 3, 5, 9, 7))
    'long-stay-report-05-03-2024-0907.pdf'
    """
    kind = report_kind.strip().replace(" ", "-") or "report"
    return f"{kind}-{generated_at.strftime(ARTIFACT_TIMESTAMP_FORMAT)}.{ext.lstrip('.')}"
