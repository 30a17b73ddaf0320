# SPDX-License-Identifier: MIT

import re
from typing import Iterable, Optional

from macnotes.configuration import DEFAULT_FOLDER_NAME

# folder names live on a single line in note headers and the folder list
_LINE_BREAKS = re.compile(r"[\r\n]+")


def clean_folder_name(name: str) -> str:
    return _LINE_BREAKS.sub(" ", name).strip()


def normalize_folder_name(folder: Optional[str]) -> str:
    """Trim a folder name, falling back to the default folder when blank."""
    cleaned = clean_folder_name(folder or "")
    if cleaned == "":
        return DEFAULT_FOLDER_NAME
    return cleaned


def sort_folders(folders: Iterable[str]) -> list[str]:
    """
    Deduplicate and order folder names.

    The default folder is pinned first, the rest follow case-insensitively
    ascending. Names stay case-sensitive, so "work" and "Work" are distinct.
    """
    unique = list(dict.fromkeys(folders))
    others = [folder for folder in unique if folder != DEFAULT_FOLDER_NAME]
    others.sort(key=lambda folder: (folder.casefold(), folder))
    return [DEFAULT_FOLDER_NAME] + others


def parse_folder_lines(text: str) -> list[str]:
    folders = [line.strip() for line in text.splitlines()]
    return [folder for folder in folders if folder != ""]
