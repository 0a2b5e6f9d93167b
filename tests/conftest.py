"""Shared fixtures for ward-reports tests."""

from __future__ import annotations

import pytest

from tests.fakes.fake_records import make_record
from ward_reports.core.config import ReportLayoutConfig
from ward_reports.models import ReportRecord


@pytest.fixture
def layout_config() -> ReportLayoutConfig:
    """Default layout settings."""
    return ReportLayoutConfig()


@pytest.fixture
def records() -> list[ReportRecord]:
    """Three valid admitted records."""
    return [make_record(i) for i in range(1, 4)]
