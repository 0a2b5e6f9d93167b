"""Pydantic data models for ward reports.

These mirror the records the ward-management data stores hand over for
reporting: a patient with the current admission, and the clinical notes
written during that stay.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

# ── People ───────────────────────────────────────────────────────────


class Doctor(BaseModel):
    """Staff member shown as admitting doctor or note author."""

    name: str = ""
    medical_code: str = ""
    role: Literal["doctor", "nurse", "administrator", ""] = ""
    department: str = ""


# ── Admission / patient records ──────────────────────────────────────


class Admission(BaseModel):
    """The admission a report section is about."""

    admission_date: Optional[datetime] = None
    department: str = ""
    diagnosis: str = ""
    status: Literal["active", "discharged", "transferred"] = "active"
    admitting_doctor: Optional[Doctor] = None


class ReportRecord(BaseModel):
    """One patient record eligible for a report section.

    ``attributes`` carries extra label/value pairs rendered after the
    admission rows, in insertion order.
    """

    record_id: str = ""
    name: str = ""
    mrn: str = ""
    admission: Optional[Admission] = None
    attributes: dict[str, str] = Field(default_factory=dict)

    @property
    def label(self) -> str:
        """Identifier used in failure messages."""
        return self.mrn or self.record_id or "Unknown"


# ── Notes ────────────────────────────────────────────────────────────


class NoteEntry(BaseModel):
    """A clinical note attached to a record."""

    created_at: datetime
    author: Doctor = Field(default_factory=Doctor)
    content: str = ""
