"""Table builder: turns records and notes into ``TableDescription`` values.

Builders are pure.  They never draw and never paginate; every value is
bounded by the configured truncation limits so row heights stay predictable.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Optional, Sequence

from ward_reports.core.config import ReportLayoutConfig
from ward_reports.layout.decorations import DATE_FORMAT, DATETIME_FORMAT
from ward_reports.layout.models import (
    CellStyle,
    HeaderCell,
    TableDescription,
    TableRow,
    TextCell,
    VAlign,
)
from ward_reports.layout.styles import (
    CLINICAL_NOTES_TITLE,
    FONT_SIZES,
    INFO_COLUMN_FRACTIONS,
    NOTES_COLUMN_FRACTIONS,
    OVERVIEW_COLUMN_FRACTIONS,
    OVERVIEW_TITLE,
    PATIENT_INFO_TITLE,
)
from ward_reports.layout.text import display_text
from ward_reports.models import Doctor, NoteEntry, ReportRecord

UNASSIGNED_DOCTOR = "Not assigned"

INFO_COLUMNS = 4
NOTES_COLUMNS = 4
OVERVIEW_COLUMNS = 6

OVERVIEW_LABELS = (
    "Patient Name",
    "MRN",
    "Department",
    "Attending Doctor",
    "Admission Date",
    "Stay Duration",
)

_LABEL_STYLE = CellStyle(bold=True)
_COLUMN_LABEL_STYLE = CellStyle(bold=True, font_size=FONT_SIZES["small"])
_SMALL_TOP_STYLE = CellStyle(font_size=FONT_SIZES["small"], valign=VAlign.TOP)
_BODY_TOP_STYLE = CellStyle(valign=VAlign.TOP)
_SMALL_STYLE = CellStyle(font_size=FONT_SIZES["small"])


def _banner(title: str, columns: int) -> TableRow:
    return TableRow(cells=(HeaderCell(text=title, col_span=columns),))


def _pair_rows(pairs: Sequence[tuple[str, str]]) -> list[TableRow]:
    """Lay label/value pairs out two per row, padding an odd tail."""
    padded = list(pairs)
    if len(padded) % 2:
        padded.append(("", ""))
    rows = []
    for i in range(0, len(padded), 2):
        (l1, v1), (l2, v2) = padded[i], padded[i + 1]
        rows.append(
            TableRow(
                cells=(
                    TextCell(text=l1, style=_LABEL_STYLE),
                    TextCell(text=v1),
                    TextCell(text=l2, style=_LABEL_STYLE),
                    TextCell(text=v2),
                )
            )
        )
    return rows


def _format_date(value: Optional[datetime], fmt: str, placeholder: str) -> str:
    return value.strftime(fmt) if value is not None else placeholder


def author_descriptor(author: Doctor) -> str:
    """``name - (code) - Role - department`` with empty parts dropped."""
    parts = [
        author.name,
        f"({author.medical_code})" if author.medical_code else "",
        author.role.capitalize(),
        author.department,
    ]
    return " - ".join(p for p in parts if p)


def stay_days(admitted: datetime, as_of: datetime) -> int:
    """Whole days (rounded up) between *admitted* and *as_of*, never negative."""
    if (admitted.tzinfo is None) != (as_of.tzinfo is None):
        as_of = as_of.replace(tzinfo=admitted.tzinfo)
    seconds = (as_of - admitted).total_seconds()
    return max(0, math.ceil(seconds / 86400))


def build_info_table(
    record: ReportRecord,
    config: Optional[ReportLayoutConfig] = None,
) -> TableDescription:
    """Patient information section for *record*.

    Returns an empty table when the record carries no admission.
    """
    cfg = config or ReportLayoutConfig()
    admission = record.admission
    if admission is None:
        return TableDescription(columns=INFO_COLUMNS, column_fractions=INFO_COLUMN_FRACTIONS)

    def value(text: Optional[str]) -> str:
        return display_text(text, cfg.info_value_max_chars, cfg.placeholder)

    doctor = admission.admitting_doctor
    doctor_name = doctor.name if doctor is not None and doctor.name.strip() else UNASSIGNED_DOCTOR

    pairs: list[tuple[str, str]] = [
        ("MRN:", value(record.mrn)),
        ("Department:", value(admission.department)),
        ("Patient:", value(record.name)),
        ("Doctor:", value(doctor_name)),
        ("Admission:", _format_date(admission.admission_date, DATE_FORMAT, cfg.placeholder)),
        ("Diagnosis:", value(admission.diagnosis)),
    ]
    pairs.extend((f"{value(label)}:", value(text)) for label, text in record.attributes.items())

    rows = [_banner(PATIENT_INFO_TITLE, INFO_COLUMNS), *_pair_rows(pairs)]
    return TableDescription(
        columns=INFO_COLUMNS,
        column_fractions=INFO_COLUMN_FRACTIONS,
        rows=tuple(rows),
    )


def build_notes_table(
    notes: Sequence[NoteEntry],
    config: Optional[ReportLayoutConfig] = None,
) -> TableDescription:
    """Clinical notes section; empty when there are no notes."""
    cfg = config or ReportLayoutConfig()
    if not notes:
        return TableDescription(columns=NOTES_COLUMNS, column_fractions=NOTES_COLUMN_FRACTIONS)

    rows = [
        _banner(CLINICAL_NOTES_TITLE, NOTES_COLUMNS),
        TableRow(
            cells=(
                TextCell(text="Date", style=_COLUMN_LABEL_STYLE),
                TextCell(text="Author", style=_COLUMN_LABEL_STYLE),
                TextCell(text="Note", col_span=2, style=_COLUMN_LABEL_STYLE),
            )
        ),
    ]
    for note in notes:
        rows.append(
            TableRow(
                cells=(
                    TextCell(
                        text=_format_date(note.created_at, DATETIME_FORMAT, cfg.placeholder),
                        style=_SMALL_TOP_STYLE,
                    ),
                    TextCell(
                        text=display_text(
                            author_descriptor(note.author), cfg.author_max_chars, cfg.placeholder
                        ),
                        style=_SMALL_TOP_STYLE,
                    ),
                    TextCell(
                        text=display_text(note.content, cfg.note_max_chars, cfg.placeholder),
                        col_span=2,
                        style=_BODY_TOP_STYLE,
                    ),
                )
            )
        )

    return TableDescription(
        columns=NOTES_COLUMNS,
        column_fractions=NOTES_COLUMN_FRACTIONS,
        rows=tuple(rows),
    )


def build_overview_table(
    records: Sequence[ReportRecord],
    as_of: datetime,
    config: Optional[ReportLayoutConfig] = None,
) -> TableDescription:
    """One summary row per admitted record, with length of stay up to *as_of*."""
    cfg = config or ReportLayoutConfig()
    admitted = [(r, r.admission) for r in records if r.admission is not None]
    if not admitted:
        return TableDescription(columns=OVERVIEW_COLUMNS, column_fractions=OVERVIEW_COLUMN_FRACTIONS)

    def value(text: Optional[str]) -> str:
        return display_text(text, cfg.info_value_max_chars, cfg.placeholder)

    rows = [
        _banner(OVERVIEW_TITLE, OVERVIEW_COLUMNS),
        TableRow(cells=tuple(TextCell(text=label, style=_COLUMN_LABEL_STYLE) for label in OVERVIEW_LABELS)),
    ]
    for record, admission in admitted:
        doctor = admission.admitting_doctor
        if admission.admission_date is not None:
            stay = f"{stay_days(admission.admission_date, as_of)} days"
        else:
            stay = cfg.placeholder
        texts = (
            value(record.name),
            value(record.mrn),
            value(admission.department),
            value(doctor.name if doctor is not None and doctor.name.strip() else UNASSIGNED_DOCTOR),
            _format_date(admission.admission_date, DATE_FORMAT, cfg.placeholder),
            stay,
        )
        rows.append(TableRow(cells=tuple(TextCell(text=t, style=_SMALL_STYLE) for t in texts)))

    return TableDescription(
        columns=OVERVIEW_COLUMNS,
        column_fractions=OVERVIEW_COLUMN_FRACTIONS,
        rows=tuple(rows),
    )
