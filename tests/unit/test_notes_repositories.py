"""Tests for the notes repository backends."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from tests.fakes.fake_records import make_note
from ward_reports.core.config import NotesStoreConfig
from ward_reports.exceptions import NotesLookupError
from ward_reports.repositories import (
    FileNotesRepository,
    INotesRepository,
    MemoryNotesRepository,
    create_notes_repository,
)


class TestMemoryNotesRepository:
    @pytest.mark.asyncio
    async def test_returns_notes_in_order(self) -> None:
        notes = [make_note("first"), make_note("second", minute=5)]
        repo = MemoryNotesRepository({"r1": notes})
        fetched = await repo.fetch_notes("r1")
        assert [n.content for n in fetched] == ["first", "second"]

    @pytest.mark.asyncio
    async def test_unknown_record_has_no_notes(self) -> None:
        assert await MemoryNotesRepository().fetch_notes("nobody") == []

    @pytest.mark.asyncio
    async def test_failing_id_raises(self) -> None:
        repo = MemoryNotesRepository(failing_ids=["r1"])
        with pytest.raises(NotesLookupError) as excinfo:
            await repo.fetch_notes("r1")
        assert excinfo.value.record_id == "r1"

    @pytest.mark.asyncio
    async def test_add_and_fail_for(self) -> None:
        repo = MemoryNotesRepository()
        repo.add("r1", make_note("added"))
        assert [n.content for n in await repo.fetch_notes("r1")] == ["added"]
        repo.fail_for("r1")
        with pytest.raises(NotesLookupError):
            await repo.fetch_notes("r1")
        assert repo.calls == ["r1", "r1"]

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryNotesRepository(), INotesRepository)


class TestFileNotesRepository:
    @pytest.mark.asyncio
    async def test_save_then_fetch(self, tmp_path: Path) -> None:
        repo = FileNotesRepository(tmp_path)
        repo.save("rec-1", [make_note("hello")])
        fetched = await repo.fetch_notes("rec-1")
        assert [n.content for n in fetched] == ["hello"]
        assert fetched[0].author.name == "Dr. House"

    @pytest.mark.asyncio
    async def test_missing_file_means_no_notes(self, tmp_path: Path) -> None:
        assert await FileNotesRepository(tmp_path / "absent").fetch_notes("rec-1") == []

    @pytest.mark.asyncio
    async def test_bad_json_raises_lookup_error(self, tmp_path: Path) -> None:
        (tmp_path / "rec-1.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(NotesLookupError, match="rec-1"):
            await FileNotesRepository(tmp_path).fetch_notes("rec-1")

    @pytest.mark.asyncio
    async def test_path_separators_are_neutralized(self, tmp_path: Path) -> None:
        repo = FileNotesRepository(tmp_path)
        repo.save("ward/rec-1", [make_note()])
        assert (tmp_path / "ward_rec-1.json").is_file()
        assert len(await repo.fetch_notes("ward/rec-1")) == 1

    @pytest.mark.asyncio
    async def test_file_read_runs_off_the_event_loop_thread(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        repo = FileNotesRepository(tmp_path)
        repo.save("rec-1", [make_note()])
        reader_threads: list[threading.Thread] = []
        original = FileNotesRepository._read_notes

        def spy(self: FileNotesRepository, record_id: str) -> list:
            reader_threads.append(threading.current_thread())
            return original(self, record_id)

        monkeypatch.setattr(FileNotesRepository, "_read_notes", spy)

        assert len(await repo.fetch_notes("rec-1")) == 1
        assert reader_threads
        assert reader_threads[0] is not threading.current_thread()

    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        assert isinstance(FileNotesRepository(tmp_path), INotesRepository)


class TestCreateNotesRepository:
    def test_memory_backend(self) -> None:
        assert isinstance(create_notes_repository(NotesStoreConfig(backend="memory")), MemoryNotesRepository)

    def test_file_backend(self, tmp_path: Path) -> None:
        repo = create_notes_repository(NotesStoreConfig(backend="file", store_path=tmp_path))
        assert isinstance(repo, FileNotesRepository)
