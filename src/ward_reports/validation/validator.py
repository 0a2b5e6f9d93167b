"""Record validation: required fields before a record may be laid out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ward_reports.exceptions import RecordValidationError
from ward_reports.models import ReportRecord

log = logging.getLogger(__name__)

IDENTITY_FIELDS: tuple[str, ...] = ("record_id", "name", "mrn")
ADMISSION_FIELDS: tuple[str, ...] = ("admission_date", "department", "diagnosis")


@dataclass
class RecordValidation:
    """Outcome of validating one record."""

    record: ReportRecord
    missing_fields: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.missing_fields

    def describe(self) -> str:
        """One-line summary, e.g. ``Record MRN-1: missing department, diagnosis``."""
        return f"Record {self.record.label}: missing {', '.join(self.missing_fields)}"

    def to_error(self) -> RecordValidationError:
        return RecordValidationError(f"missing {', '.join(self.missing_fields)}", self.missing_fields)


@dataclass
class BatchValidation:
    """A batch split into layout-eligible records and rejections."""

    valid: list[ReportRecord] = field(default_factory=list)
    rejected: list[RecordValidation] = field(default_factory=list)

    def summary_lines(self) -> list[str]:
        return [r.describe() for r in self.rejected]


def _blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_record(record: ReportRecord) -> RecordValidation:
    """Check identity fields and the admission context of *record*."""
    missing = [name for name in IDENTITY_FIELDS if _blank(getattr(record, name))]

    admission = record.admission
    if admission is None:
        missing.extend(ADMISSION_FIELDS)
    else:
        missing.extend(name for name in ADMISSION_FIELDS if _blank(getattr(admission, name)))

    return RecordValidation(record=record, missing_fields=missing)


def validate_records(records: Sequence[ReportRecord]) -> BatchValidation:
    """Validate every record; never raises."""
    batch = BatchValidation()
    for record in records:
        result = validate_record(record)
        if result.valid:
            batch.valid.append(record)
        else:
            log.info("Excluding %s", result.describe())
            batch.rejected.append(result)
    return batch
