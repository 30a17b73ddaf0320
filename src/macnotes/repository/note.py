# SPDX-License-Identifier: MIT

import logging
import os
from pathlib import Path
from typing import Optional

from macnotes import codec, configuration
from macnotes.model.entity_id import EntityId, parse_entity_id
from macnotes.model.note import Note
from macnotes.repository.atomic import atomic_write_text
from macnotes.repository.folder import FolderRepository
from macnotes.service.folder import normalize_folder_name, sort_folders
from macnotes.time import datetime_to_timestamp, file_times

logger = logging.getLogger(__name__)


class NoteRepository:
    """
    One ``<id>.txt`` file per note plus a folder list, all in one directory.

    The directory mirrors whatever collection it was last saved with: saving
    writes every note and removes note files that are no longer wanted.
    """

    def __init__(self, notes_dir: Optional[Path] = None) -> None:
        self._notes_dir = notes_dir

    @property
    def notes_dir(self) -> Path:
        if self._notes_dir is not None:
            return self._notes_dir
        return configuration.DATA_NOTES_DIR

    @property
    def folders(self) -> FolderRepository:
        return FolderRepository(self.notes_dir / configuration.FOLDERS_META_FILENAME)

    def note_path(self, id: EntityId) -> Path:
        return self.notes_dir / f"{id}{configuration.NOTE_FILE_SUFFIX}"

    def load(self) -> tuple[list[Note], list[str]]:
        """
        Read every note file and the folder list.

        Any I/O failure yields an empty collection with only the default
        folder; the caller decides how to bootstrap from there.
        """
        try:
            self.notes_dir.mkdir(parents=True, exist_ok=True)
            folders = self.folders.load_folders()
            notes: list[Note] = []
            for path in self.__note_files():
                note = self.__load_note(path)
                if note is not None:
                    notes.append(note)
        except OSError:
            logger.warning(
                "failed to load notes from %s", self.notes_dir, exc_info=True
            )
            return [], [configuration.DEFAULT_FOLDER_NAME]

        # the folder list may be stale or missing; notes are authoritative
        folders.extend(note["folder"] for note in notes)
        return notes, sort_folders(folders)

    def save(self, notes: list[Note], folders: list[str]) -> None:
        """
        Converge the directory with the given notes and folders.

        Raises OSError; the store decides what to do about it.
        """
        self.notes_dir.mkdir(parents=True, exist_ok=True)

        expected_filenames: set[str] = set()
        for note in notes:
            path = self.note_path(note["id"])
            expected_filenames.add(path.name)
            atomic_write_text(path, codec.encode(note))
            # the modification time carries `updated` across restarts
            updated = datetime_to_timestamp(note["updated"])
            os.utime(path, (updated, updated))

        for path in self.__note_files():
            # files that were never notes are left alone
            if parse_entity_id(path.stem) is None:
                continue
            if path.name not in expected_filenames:
                try:
                    path.unlink()
                except OSError:
                    logger.warning("failed to remove stale note file %s", path)

        self.folders.save_folders(folders)

    def __note_files(self) -> list[Path]:
        return sorted(
            path
            for path in self.notes_dir.iterdir()
            if path.suffix.lower() == configuration.NOTE_FILE_SUFFIX
            and path.is_file()
        )

    def __load_note(self, path: Path) -> Optional[Note]:
        id = parse_entity_id(path.stem)
        if id is None:
            logger.debug("skipping note file with unparseable id: %s", path.name)
            return None

        created, updated = file_times(path.stat())
        # malformed bytes become replacement characters instead of failing
        text = path.read_bytes().decode("utf-8", errors="replace")
        decoded = codec.decode(text)

        return {
            "id": id,
            "folder": normalize_folder_name(decoded["folder"]),
            "body": decoded["body"],
            "rich_text": decoded["rich_text"],
            "created": created,
            "updated": updated,
        }


NOTE_REPO = NoteRepository()
