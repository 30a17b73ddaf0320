from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, Optional

import pendulum
import pytest

from macnotes.model.entity_id import generate_entity_id
from macnotes.model.note import Note
from macnotes.repository.note import NoteRepository
from macnotes.store import NoteStore

# long enough that a test never races the timer unless it means to
NEVER = 60.0


class CountingNoteRepository(NoteRepository):
    def __init__(self, notes_dir: Path) -> None:
        super().__init__(notes_dir)
        self.save_calls = 0

    def save(self, notes: list[Note], folders: list[str]) -> None:
        self.save_calls += 1
        super().save(notes, folders)


def make_note(
    body: str,
    updated: pendulum.DateTime,
    folder: str = "General",
    rich_text: Optional[str] = None,
) -> Note:
    return {
        "id": generate_entity_id(),
        "folder": folder,
        "body": body,
        "rich_text": rich_text,
        "created": updated,
        "updated": updated,
    }


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    return tmp_path / "notes"


@pytest.fixture
def repository(notes_dir: Path) -> CountingNoteRepository:
    return CountingNoteRepository(notes_dir)


@pytest.fixture
def make_store(
    repository: CountingNoteRepository,
) -> Iterator[Callable[..., NoteStore]]:
    stores: list[NoteStore] = []

    def factory(save_delay: float = NEVER) -> NoteStore:
        store = NoteStore(repository, save_delay=save_delay)
        stores.append(store)
        return store

    yield factory

    for store in stores:
        store.cancel_pending_save()
