"""File-based notes repository: one JSON array per record in a directory."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ward_reports.exceptions import NotesLookupError
from ward_reports.models import NoteEntry

log = logging.getLogger(__name__)

_NOTES_ADAPTER = TypeAdapter(list[NoteEntry])


class FileNotesRepository:
    """Reads ``<base_path>/<record_id>.json`` files.

    A missing file means the record has no notes.  A file that cannot be
    read or parsed raises ``NotesLookupError``.
    """

    def __init__(self, base_path: Path) -> None:
        self._base = Path(base_path)

    def _key_path(self, record_id: str) -> Path:
        safe_key = record_id.replace("/", "_").replace("\\", "_")
        if not safe_key.endswith(".json"):
            safe_key += ".json"
        return self._base / safe_key

    def save(self, record_id: str, notes: list[NoteEntry]) -> None:
        path = self._key_path(record_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(_NOTES_ADAPTER.dump_json(notes, indent=2))
        log.debug(f"Saved {len(notes)} notes for {record_id} to {path}")

    async def fetch_notes(self, record_id: str) -> list[NoteEntry]:
        return await asyncio.to_thread(self._read_notes, record_id)

    def _read_notes(self, record_id: str) -> list[NoteEntry]:
        path = self._key_path(record_id)
        if not path.is_file():
            return []
        try:
            raw = path.read_text(encoding="utf-8")
            return _NOTES_ADAPTER.validate_json(raw)
        except (OSError, ValidationError) as exc:
            raise NotesLookupError(
                f"Could not read notes for record {record_id} from {path}: {exc}",
                record_id=record_id,
            ) from exc
