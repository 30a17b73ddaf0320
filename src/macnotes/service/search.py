# SPDX-License-Identifier: MIT

from typing import Optional

from macnotes.model.note import Note, title_line


def __contains_ignore_case(query: str, text: str) -> bool:
    return query.casefold() in text.casefold()


def note_matches(note: Note, query: str) -> bool:
    """
    Case-insensitive substring match against the title line or the body.

    A blank query matches every note.
    """
    trimmed = query.strip()
    if trimmed == "":
        return True
    return __contains_ignore_case(trimmed, title_line(note)) or __contains_ignore_case(
        trimmed, note["body"]
    )


def filter_notes(
    notes: list[Note], query: str = "", folder: Optional[str] = None
) -> list[Note]:
    """
    Filter by folder (None or blank means every folder), then by query, and
    order by most recently updated first.

    Sorting is stable, so notes with equal timestamps keep collection order.
    """
    if folder is not None and folder != "":
        notes = [note for note in notes if note["folder"] == folder]

    matching = [note for note in notes if note_matches(note, query)]
    return sorted(matching, key=lambda note: note["updated"], reverse=True)


def most_recently_updated(notes: list[Note]) -> Optional[Note]:
    if len(notes) == 0:
        return None
    return filter_notes(notes)[0]
