# SPDX-License-Identifier: MIT

import logging
import threading
from copy import deepcopy
from enum import Enum
from typing import Callable, Optional, TypeAlias

from macnotes import configuration
from macnotes.debounce import DebouncedAction
from macnotes.model.entity_id import EntityId
from macnotes.model.note import Note
from macnotes.repository.note import NOTE_REPO, NoteRepository
from macnotes.service.folder import (
    clean_folder_name,
    normalize_folder_name,
    sort_folders,
)
from macnotes.service.search import filter_notes, most_recently_updated
from macnotes.template.note import get_note_template
from macnotes.time import now_utc

logger = logging.getLogger(__name__)


class StoreChange(Enum):
    NOTES = "notes"
    FOLDERS = "folders"
    SELECTION = "selection"


StoreObserver: TypeAlias = Callable[[StoreChange], None]


class NoteStore:
    """
    The in-memory notes and folders, with the notes directory as a
    write-behind mirror.

    Mutations apply immediately and re-arm a debounced save; a burst of
    edits therefore reaches the disk as a single reconciliation pass.
    State is loaded on first access.
    """

    def __init__(
        self,
        repository: Optional[NoteRepository] = None,
        save_delay: Optional[float] = None,
    ) -> None:
        self.repository = repository if repository is not None else NOTE_REPO
        if save_delay is None:
            save_delay = configuration.DEFAULT_SAVE_DELAY_MS / 1000
        self._lock = threading.RLock()
        self._notes: Optional[list[Note]] = None
        self._folders: list[str] = [configuration.DEFAULT_FOLDER_NAME]
        self._selected_id: Optional[EntityId] = None
        self._observers: list[StoreObserver] = []
        self._saver = DebouncedAction(self.save_now, save_delay)

    @property
    def save_delay(self) -> float:
        return self._saver.delay

    @save_delay.setter
    def save_delay(self, value: float) -> None:
        self._saver.delay = value

    @property
    def is_loaded(self) -> bool:
        return self._notes is not None

    @property
    def save_pending(self) -> bool:
        return self._saver.pending

    def __loaded_notes(self) -> list[Note]:
        with self._lock:
            if self._notes is None:
                self.__load_data()
            if self._notes is None:
                raise ValueError()
            return self._notes

    @property
    def notes(self) -> list[Note]:
        with self._lock:
            return deepcopy(self.__loaded_notes())

    @property
    def folders(self) -> list[str]:
        with self._lock:
            self.__loaded_notes()  # load on first access
            return list(self._folders)

    @property
    def selected_note(self) -> Optional[Note]:
        with self._lock:
            self.__loaded_notes()  # load on first access
            if self._selected_id is None:
                return None
            note = self.__find(self._selected_id)
            return deepcopy(note) if note is not None else None

    def __load_data(self) -> None:
        notes, folders = self.repository.load()
        self._notes = notes
        self._folders = sort_folders(folders)

        if len(notes) == 0:
            starter = get_note_template()
            starter["body"] = configuration.STARTER_NOTE_TEXT
            self._notes.append(starter)
            self._selected_id = starter["id"]
            logger.info("created starter note %s", starter["id"])
            self.save_now()
            return

        newest = most_recently_updated(notes)
        self._selected_id = newest["id"] if newest is not None else None

    def __find(self, id: EntityId) -> Optional[Note]:
        for note in self.__loaded_notes():
            if note["id"] == id:
                return note
        return None

    def __ensure_folder_exists(self, folder: str) -> bool:
        if folder in self._folders:
            return False
        self._folders = sort_folders(self._folders + [folder])
        return True

    def subscribe(self, observer: StoreObserver) -> Callable[[], None]:
        """Register a change callback. Returns a function that unregisters it."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def __notify(self, *changes: StoreChange) -> None:
        with self._lock:
            observers = list(self._observers)
        for change in changes:
            for observer in observers:
                observer(change)

    def __schedule_save(self) -> None:
        self._saver.schedule()

    def get_note(self, id: EntityId) -> Optional[Note]:
        with self._lock:
            note = self.__find(id)
            return deepcopy(note) if note is not None else None

    def resolve_id(self, prefix: str) -> list[EntityId]:
        """Ids of every note whose id starts with prefix (case-insensitive)."""
        prefix = prefix.strip().lower()
        with self._lock:
            ids = [note["id"] for note in self.__loaded_notes()]
        exact = [id for id in ids if id.lower() == prefix]
        if len(exact) > 0:
            return exact
        return [id for id in ids if id.lower().startswith(prefix)]

    def select_note(self, id: Optional[EntityId]) -> None:
        with self._lock:
            if id is not None and self.__find(id) is None:
                return
            if self._selected_id == id:
                return
            self._selected_id = id
        self.__notify(StoreChange.SELECTION)

    def add_note(self, folder: Optional[str] = None) -> Note:
        target_folder = normalize_folder_name(folder)
        note = get_note_template()
        note["folder"] = target_folder

        with self._lock:
            self.__loaded_notes().insert(0, note)
            self._selected_id = note["id"]
            self.__ensure_folder_exists(target_folder)
            self.__schedule_save()
            created = deepcopy(note)

        self.__notify(StoreChange.NOTES, StoreChange.FOLDERS, StoreChange.SELECTION)
        return created

    def delete_note(self, id: EntityId) -> None:
        with self._lock:
            note = self.__find(id)
            if note is None:
                return
            self.__loaded_notes().remove(note)

            selection_changed = self._selected_id == id
            if selection_changed:
                newest = most_recently_updated(self.__loaded_notes())
                self._selected_id = newest["id"] if newest is not None else None
            self.__schedule_save()

        if selection_changed:
            self.__notify(StoreChange.NOTES, StoreChange.SELECTION)
        else:
            self.__notify(StoreChange.NOTES)

    def update_note(
        self, id: EntityId, body: str, rich_text: Optional[str] = None
    ) -> None:
        with self._lock:
            note = self.__find(id)
            if note is None:
                return
            if note["body"] == body and note["rich_text"] == rich_text:
                return

            note["body"] = body
            note["rich_text"] = rich_text
            note["updated"] = now_utc()
            self.__schedule_save()

        self.__notify(StoreChange.NOTES)

    def move_note(self, id: EntityId, folder: str) -> None:
        target_folder = normalize_folder_name(folder)

        with self._lock:
            note = self.__find(id)
            if note is None or note["folder"] == target_folder:
                return

            note["folder"] = target_folder
            # moving counts as a change for recency ordering
            note["updated"] = now_utc()
            self.__ensure_folder_exists(target_folder)
            self.__schedule_save()

        self.__notify(StoreChange.NOTES, StoreChange.FOLDERS)

    def add_folder(self, name: str) -> Optional[str]:
        folder = clean_folder_name(name)
        if folder == "":
            return None

        with self._lock:
            self.__loaded_notes()  # load on first access
            self.__ensure_folder_exists(folder)
            self.__schedule_save()

        self.__notify(StoreChange.FOLDERS)
        return folder

    def query(self, search_text: str = "", folder: Optional[str] = None) -> list[Note]:
        with self._lock:
            return deepcopy(filter_notes(self.__loaded_notes(), search_text, folder))

    def save_now(self) -> bool:
        """
        Write the current state to disk.

        Failures are logged and swallowed; the next successful save brings
        the directory back in line.
        """
        # held for the whole pass so two saves never interleave their writes
        with self._lock:
            if self._notes is None:
                return False

            try:
                self.repository.save(self._notes, self._folders)
            except (OSError, UnicodeError):
                logger.exception(
                    "failed to save notes to %s", self.repository.notes_dir
                )
                return False
            logger.debug("saved %d notes", len(self._notes))
            return True

    def flush(self) -> bool:
        """Run a pending debounced save immediately."""
        return self._saver.flush()

    def cancel_pending_save(self) -> bool:
        return self._saver.cancel()


NOTE_STORE = NoteStore()
