# SPDX-License-Identifier: MIT

import os
import shlex
import subprocess
import tempfile
from typing import Optional

import typer

from macnotes import configuration
from macnotes.model.entity_id import EntityId
from macnotes.store import NoteStore
from macnotes.view.views.note import short_id


def resolve_note_id(store: NoteStore, id_param: str) -> EntityId:
    """
    Resolve a full note id or a unique prefix of one.

    Raises:
        typer.BadParameter: If nothing matches or the prefix is ambiguous
    """
    if id_param.strip() == "":
        raise typer.BadParameter("note id cannot be blank")

    matches = store.resolve_id(id_param)
    if len(matches) == 0:
        raise typer.BadParameter(f"no note with id '{id_param}'")
    if len(matches) > 1:
        candidates = ", ".join(short_id(match) for match in matches)
        raise typer.BadParameter(
            f"id '{id_param}' is ambiguous, it matches: {candidates}"
        )
    return matches[0]


def parse_log_level(level: Optional[str]) -> Optional[str]:
    if level is None:
        return None
    normalized = level.strip().upper()
    if normalized not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise typer.BadParameter(f"unknown log level '{level}'")
    return normalized


def open_editor_for_text(initial_text: Optional[str] = None) -> Optional[str]:
    """
    Let the user write note text in $VISUAL or $EDITOR (nano when unset).

    Returns the text with trailing newlines removed, or None when the user
    leaves the file blank.
    """
    editor = os.environ.get("VISUAL") or os.environ.get("EDITOR") or "nano"

    with tempfile.NamedTemporaryFile(
        mode="w+", suffix=configuration.NOTE_FILE_SUFFIX, encoding="utf-8"
    ) as note_file:
        note_file.write(initial_text or "")
        note_file.flush()

        # editors are often configured with arguments, e.g. "code --wait"
        subprocess.run([*shlex.split(editor), note_file.name], check=True)

        with open(note_file.name, encoding="utf-8") as edited:
            text = edited.read()

    if text.strip() == "":
        return None
    return text.rstrip("\n")
