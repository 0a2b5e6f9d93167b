"""In-memory notes repository: dict-backed, used by the API and tests."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence

from ward_reports.exceptions import NotesLookupError
from ward_reports.models import NoteEntry

log = logging.getLogger(__name__)


class MemoryNotesRepository:
    """Serves notes from a plain dict; nothing touches disk.

    Record ids listed in ``failing_ids`` raise ``NotesLookupError``.
    """

    def __init__(
        self,
        notes: Optional[Mapping[str, Sequence[NoteEntry]]] = None,
        failing_ids: Iterable[str] = (),
    ) -> None:
        self._store: dict[str, list[NoteEntry]] = {k: list(v) for k, v in (notes or {}).items()}
        self._failing = set(failing_ids)
        self.calls: list[str] = []

    def add(self, record_id: str, note: NoteEntry) -> None:
        self._store.setdefault(record_id, []).append(note)

    def fail_for(self, record_id: str) -> None:
        self._failing.add(record_id)

    async def fetch_notes(self, record_id: str) -> list[NoteEntry]:
        self.calls.append(record_id)
        if record_id in self._failing:
            raise NotesLookupError(f"Notes lookup failed for record {record_id}", record_id=record_id)
        notes = list(self._store.get(record_id, []))
        log.debug(f"Fetched {len(notes)} notes for {record_id} from memory store")
        return notes
