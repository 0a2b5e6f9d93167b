"""Tests for the report rendering API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

reportlab = pytest.importorskip("reportlab")

from tests.fakes.fake_records import make_note, make_record  # noqa: E402
from ward_reports.api.middleware.error_handler import register_error_handlers  # noqa: E402
from ward_reports.api.routes import health, reports  # noqa: E402
from ward_reports.core.config import AppSettings  # noqa: E402


def _build_app() -> FastAPI:
    """Minimal app with the report routes and default settings."""
    settings = AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        app.state.settings = settings
        yield

    app = FastAPI(lifespan=lifespan)
    register_error_handlers(app)
    app.include_router(health.router)
    app.include_router(reports.router, prefix="/api")
    return app


def _payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "records": [make_record(1).model_dump(mode="json"), make_record(2).model_dump(mode="json")],
        "notes": {"rec-1": [make_note().model_dump(mode="json")]},
        "generated_at": "2024-03-15T14:30:00",
    }
    payload.update(overrides)
    return payload


class TestHealth:
    def test_health(self) -> None:
        with TestClient(_build_app()) as client:
            resp = client.get("/health")
            assert resp.status_code == 200
            assert resp.json() == {"status": "ok"}


class TestLongStayReport:
    def test_returns_pdf_with_filename(self) -> None:
        with TestClient(_build_app()) as client:
            resp = client.post("/api/reports/long-stay", json=_payload())
            assert resp.status_code == 200
            assert resp.headers["content-type"] == "application/pdf"
            assert (
                resp.headers["content-disposition"]
                == 'attachment; filename="long-stay-report-15-03-2024-1430.pdf"'
            )
            assert resp.headers["x-report-failures"] == "0"
            assert resp.content.startswith(b"%PDF")

    def test_failure_count_header(self) -> None:
        records = [make_record(1).model_dump(mode="json"), make_record(2, diagnosis="").model_dump(mode="json")]
        with TestClient(_build_app()) as client:
            resp = client.post("/api/reports/long-stay", json=_payload(records=records))
            assert resp.status_code == 200
            assert resp.headers["x-report-failures"] == "1"

    def test_all_invalid_is_422(self) -> None:
        records = [make_record(1, mrn="").model_dump(mode="json")]
        with TestClient(_build_app()) as client:
            resp = client.post("/api/reports/long-stay", json=_payload(records=records))
            assert resp.status_code == 422
            body = resp.json()
            assert body["type"] == "fatal_assembly_error"
            assert "missing mrn" in body["error"]
            assert body["failures"][0]["kind"] == "validation"

    def test_empty_records_rejected(self) -> None:
        with TestClient(_build_app()) as client:
            resp = client.post("/api/reports/long-stay", json=_payload(records=[]))
            assert resp.status_code == 422

    def test_half_open_date_range_rejected(self) -> None:
        with TestClient(_build_app()) as client:
            resp = client.post("/api/reports/long-stay", json=_payload(start_date="2024-01-01T00:00:00"))
            assert resp.status_code == 422


class TestApplication:
    def test_app_wires_routes_and_settings(self) -> None:
        from ward_reports.api.app import app

        with TestClient(app) as client:
            assert client.get("/health").status_code == 200
            assert isinstance(client.app.state.settings, AppSettings)  # type: ignore[attr-defined]
            resp = client.post("/api/reports/long-stay", json=_payload())
            assert resp.status_code == 200
