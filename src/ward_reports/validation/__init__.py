"""Pre-layout record validation."""

from __future__ import annotations

from ward_reports.validation.validator import (
    ADMISSION_FIELDS,
    IDENTITY_FIELDS,
    BatchValidation,
    RecordValidation,
    validate_record,
    validate_records,
)

__all__ = [
    "ADMISSION_FIELDS",
    "IDENTITY_FIELDS",
    "BatchValidation",
    "RecordValidation",
    "validate_record",
    "validate_records",
]
