"""Tests for record validation."""

from __future__ import annotations

from datetime import datetime

from tests.fakes.fake_records import make_record
from ward_reports.exceptions import RecordValidationError
from ward_reports.models import Admission, ReportRecord
from ward_reports.validation import validate_record, validate_records


class TestValidateRecord:
    def test_complete_record_is_valid(self) -> None:
        result = validate_record(make_record(1))
        assert result.valid
        assert result.missing_fields == []

    def test_missing_diagnosis(self) -> None:
        result = validate_record(make_record(1, diagnosis=""))
        assert not result.valid
        assert result.missing_fields == ["diagnosis"]

    def test_whitespace_counts_as_missing(self) -> None:
        result = validate_record(make_record(1, department="   "))
        assert result.missing_fields == ["department"]

    def test_no_admission_misses_all_admission_fields(self) -> None:
        record = ReportRecord(record_id="r1", name="Ann", mrn="M1")
        result = validate_record(record)
        assert result.missing_fields == ["admission_date", "department", "diagnosis"]

    def test_identity_fields_reported_first(self) -> None:
        record = ReportRecord(
            record_id="r1",
            admission=Admission(admission_date=datetime(2024, 1, 1), department="ICU"),
        )
        result = validate_record(record)
        assert result.missing_fields == ["name", "mrn", "diagnosis"]

    def test_describe_uses_mrn_then_record_id(self) -> None:
        assert validate_record(make_record(1, diagnosis="")).describe() == "Record MRN-0001: missing diagnosis"
        assert validate_record(make_record(2, mrn="")).describe() == "Record rec-2: missing mrn"

    def test_describe_unknown_label(self) -> None:
        result = validate_record(ReportRecord())
        assert result.describe().startswith("Record Unknown: missing record_id, name, mrn")


class TestValidateRecords:
    def test_partitions_in_input_order(self) -> None:
        batch = validate_records([make_record(1), make_record(2, diagnosis=""), make_record(3)])
        assert [r.record_id for r in batch.valid] == ["rec-1", "rec-3"]
        assert [v.record.record_id for v in batch.rejected] == ["rec-2"]

    def test_never_raises_on_empty_input(self) -> None:
        batch = validate_records([])
        assert batch.valid == []
        assert batch.rejected == []

    def test_summary_lines(self) -> None:
        batch = validate_records([make_record(1, mrn=""), make_record(2, department="")])
        assert batch.summary_lines() == [
            "Record rec-1: missing mrn",
            "Record MRN-0002: missing department",
        ]

    def test_to_error_carries_missing_fields(self) -> None:
        error = validate_record(make_record(1, mrn="", diagnosis="")).to_error()
        assert isinstance(error, RecordValidationError)
        assert error.missing_fields == ["mrn", "diagnosis"]
        assert str(error) == "missing mrn, diagnosis"
