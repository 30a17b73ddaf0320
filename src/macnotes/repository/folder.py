# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

from macnotes.configuration import DEFAULT_FOLDER_NAME
from macnotes.repository.atomic import atomic_write_text
from macnotes.service.folder import parse_folder_lines, sort_folders

logger = logging.getLogger(__name__)


class FolderRepository:
    """Reads and writes the folder list kept beside the note files."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load_folders(self) -> list[str]:
        if not self.path.is_file():
            return [DEFAULT_FOLDER_NAME]

        try:
            folders = parse_folder_lines(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            logger.warning("could not read folder list %s", self.path, exc_info=True)
            return [DEFAULT_FOLDER_NAME]

        if len(folders) == 0:
            return [DEFAULT_FOLDER_NAME]
        return sort_folders(folders)

    def save_folders(self, folders: list[str]) -> None:
        atomic_write_text(self.path, "\n".join(sort_folders(folders)))
