# SPDX-License-Identifier: MIT

"""
Text encoding of a single note file.

A note file is a short header, a separator line and the raw body:

    MACNOTES_V2
    folder:<folder>
    rtf:<rich text payload, empty when absent>
    ---
    <body>

Two older layouts are still read. The oldest is a bare text file; the next
one carried ``title:``/``createdAt:``/``updatedAt:`` header lines. Decoding
never fails: anything unrecognised is treated as body text.
"""

from typing import Optional

from macnotes.configuration import DEFAULT_FOLDER_NAME
from macnotes.model.note import Note
from macnotes.model.note_file import DecodedNote, NoteFileFormat

SEPARATOR = "\n---\n"
FORMAT_MARKER = "MACNOTES_V2"

FOLDER_PREFIX = "folder:"
RICH_TEXT_PREFIX = "rtf:"
LEGACY_HEADER_PREFIXES = ("title:", "createdAt:", "updatedAt:")


def encode(note: Note) -> str:
    header = "\n".join(
        [
            FORMAT_MARKER,
            f"{FOLDER_PREFIX}{note['folder']}",
            f"{RICH_TEXT_PREFIX}{note['rich_text'] or ''}",
        ]
    )
    # The body is not escaped; see detect_format for how it is read back.
    return header + SEPARATOR + note["body"]


def detect_format(text: str) -> NoteFileFormat:
    header, separator, _ = text.partition(SEPARATOR)
    if not separator:
        return NoteFileFormat.RAW
    if header.startswith(FORMAT_MARKER):
        return NoteFileFormat.CURRENT
    if any(
        line.startswith(LEGACY_HEADER_PREFIXES) for line in header.split("\n")
    ):
        return NoteFileFormat.LEGACY
    return NoteFileFormat.RAW


def decode(text: str) -> DecodedNote:
    file_format = detect_format(text)
    if file_format is NoteFileFormat.CURRENT:
        return __decode_current(text)
    if file_format is NoteFileFormat.LEGACY:
        return __decode_legacy(text)
    return __decode_raw(text)


def __header_value(header_lines: list[str], prefix: str) -> Optional[str]:
    for line in header_lines:
        if line.startswith(prefix):
            return line[len(prefix) :]
    return None


def __decode_current(text: str) -> DecodedNote:
    header, _, body = text.partition(SEPARATOR)
    header_lines = header.split("\n")

    folder = __header_value(header_lines, FOLDER_PREFIX)
    if folder is None or folder.strip() == "":
        folder = DEFAULT_FOLDER_NAME

    rich_text = __header_value(header_lines, RICH_TEXT_PREFIX)
    if rich_text == "":
        rich_text = None

    return {
        "format": NoteFileFormat.CURRENT,
        "folder": folder,
        "body": body,
        "rich_text": rich_text,
    }


def __decode_legacy(text: str) -> DecodedNote:
    _, _, body = text.partition(SEPARATOR)
    return {
        "format": NoteFileFormat.LEGACY,
        "folder": DEFAULT_FOLDER_NAME,
        "body": body,
        "rich_text": None,
    }


def __decode_raw(text: str) -> DecodedNote:
    return {
        "format": NoteFileFormat.RAW,
        "folder": DEFAULT_FOLDER_NAME,
        "body": text,
        "rich_text": None,
    }
