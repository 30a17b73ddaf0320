# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from macnotes.model.entity_id import EntityId


class Note(TypedDict):
    id: EntityId
    folder: str
    body: str
    rich_text: Optional[str]
    created: pendulum.DateTime
    updated: pendulum.DateTime


def title_line(note: Note) -> str:
    """First line of the body, trimmed. Used as the display title."""
    lines = note["body"].splitlines()
    if len(lines) == 0:
        return ""
    return lines[0].strip()
