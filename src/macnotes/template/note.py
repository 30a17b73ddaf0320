# SPDX-License-Identifier: MIT

from macnotes.configuration import DEFAULT_FOLDER_NAME
from macnotes.model.entity_id import generate_entity_id
from macnotes.model.note import Note
from macnotes.time import now_utc


def get_note_template() -> Note:
    now = now_utc()
    return {
        "id": generate_entity_id(),
        "folder": DEFAULT_FOLDER_NAME,
        "body": "",
        "rich_text": None,
        "created": now,
        "updated": now,
    }
