"""Table builders for report sections."""

from __future__ import annotations

from ward_reports.tables.builder import (
    UNASSIGNED_DOCTOR,
    author_descriptor,
    build_info_table,
    build_notes_table,
    build_overview_table,
    stay_days,
)

__all__ = [
    "UNASSIGNED_DOCTOR",
    "author_descriptor",
    "build_info_table",
    "build_notes_table",
    "build_overview_table",
    "stay_days",
]
