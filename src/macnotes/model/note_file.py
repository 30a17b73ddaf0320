# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Optional, TypedDict


class NoteFileFormat(Enum):
    # MACNOTES_V2 header with folder and rtf lines
    CURRENT = "current"
    # title/createdAt/updatedAt header, body only
    LEGACY = "legacy"
    # plain text, or a header nobody recognises
    RAW = "raw"


class DecodedNote(TypedDict):
    format: NoteFileFormat
    folder: str
    body: str
    rich_text: Optional[str]
