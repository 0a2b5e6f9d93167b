"""Record and note factories for tests."""

from __future__ import annotations

from datetime import datetime

from ward_reports.models import Admission, Doctor, NoteEntry, ReportRecord

GENERATED_AT = datetime(2024, 3, 15, 14, 30)


def make_record(
    index: int,
    *,
    diagnosis: str = "Community-acquired pneumonia",
    department: str = "Internal Medicine",
    mrn: str | None = None,
    doctor: Doctor | None = None,
    attributes: dict[str, str] | None = None,
) -> ReportRecord:
    """Valid admitted record ``rec-<index>`` / ``MRN-<index>``."""
    return ReportRecord(
        record_id=f"rec-{index}",
        name=f"Patient {index}",
        mrn=f"MRN-{index:04d}" if mrn is None else mrn,
        admission=Admission(
            admission_date=datetime(2024, 3, 1, 8, 0),
            department=department,
            diagnosis=diagnosis,
            admitting_doctor=doctor or Doctor(name="Dr. Grey", medical_code="MC-7", role="doctor"),
        ),
        attributes=attributes or {},
    )


def make_note(content: str = "Stable overnight, continue antibiotics.", minute: int = 0) -> NoteEntry:
    return NoteEntry(
        created_at=datetime(2024, 3, 10, 9, minute),
        author=Doctor(name="Dr. House", medical_code="D-42", role="doctor", department="Diagnostics"),
        content=content,
    )
