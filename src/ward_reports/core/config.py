"""Nested pydantic-settings configuration for the application.

Each sub-config reads its own ``WARD_<GROUP>_*`` environment variables::

    export WARD_PDF_COMPANY_NAME="St. Mary Hospital"
    export WARD_NOTES_BACKEND=file
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ReportLayoutConfig(BaseSettings):
    """PDF report layout configuration.

    Env vars use ``WARD_PDF_`` prefix::

        export WARD_PDF_INCLUDE_OVERVIEW=true
        export WARD_PDF_NOTE_MAX_CHARS=300
    """

    model_config = {"env_prefix": "WARD_PDF_"}

    font_family: str = "Helvetica"
    company_name: str = "IMD-Care"
    disclaimer: str = "This is a computer-generated document."
    include_overview: bool = False
    section_min_space: float = Field(default=80.0, ge=0.0, le=400.0)
    info_value_max_chars: int = Field(default=100, ge=10)
    author_max_chars: int = Field(default=50, ge=10)
    note_max_chars: int = Field(default=500, ge=10, le=2000)
    placeholder: str = "N/A"


class NotesStoreConfig(BaseSettings):
    """Notes repository configuration.

    Env vars use ``WARD_NOTES_`` prefix.
    """

    model_config = {"env_prefix": "WARD_NOTES_"}

    backend: Literal["memory", "file"] = "file"
    store_path: Path = Path("./notes")


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``WARD_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "WARD_OBSERVABILITY_"}

    service_name: str = "ward-reports"
    log_level: str = "INFO"


class APIConfig(BaseSettings):
    """HTTP API metadata.

    Env vars use ``WARD_API_`` prefix.
    """

    model_config = {"env_prefix": "WARD_API_"}

    title: str = "Ward Reports"
    description: str = "Paginated clinical PDF reports for ward management"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    pdf: ReportLayoutConfig = ReportLayoutConfig()
    notes: NotesStoreConfig = NotesStoreConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
    api: APIConfig = APIConfig()
