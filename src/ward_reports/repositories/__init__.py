"""Notes repositories: the external notes-retrieval capability."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ward_reports.repositories.file_backend import FileNotesRepository
from ward_reports.repositories.memory_backend import MemoryNotesRepository
from ward_reports.repositories.protocols import INotesRepository

if TYPE_CHECKING:
    from ward_reports.core.config import NotesStoreConfig


def create_notes_repository(config: NotesStoreConfig) -> INotesRepository:
    """Build the repository selected by ``config.backend``."""
    if config.backend == "memory":
        return MemoryNotesRepository()
    return FileNotesRepository(Path(config.store_path))


__all__ = [
    "FileNotesRepository",
    "INotesRepository",
    "MemoryNotesRepository",
    "create_notes_repository",
]
