"""Notes repository protocol: the only data-store capability the assembler uses."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ward_reports.models import NoteEntry


@runtime_checkable
class INotesRepository(Protocol):
    """Read-only access to the clinical notes of one record."""

    async def fetch_notes(self, record_id: str) -> list[NoteEntry]:
        """Return the notes for *record_id* in display order.

        Returns an empty list when the record has no notes.  Raises on
        lookup failure; callers treat any exception as a failed lookup.
        """
        ...
