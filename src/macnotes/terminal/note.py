# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from macnotes.model.note import title_line
from macnotes.store import NOTE_STORE
from macnotes.terminal.custom_typer import AliasedTyperGroup
from macnotes.terminal.parse import open_editor_for_text, resolve_note_id
from macnotes.view.views import note as note_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a")
def add(
    folder: Annotated[
        Optional[str],
        typer.Option("--folder", "-f", help="defaults to the General folder"),
    ] = None,
    text: Annotated[
        Optional[str],
        typer.Option("--text", "-t", help="note text; opens $EDITOR when omitted"),
    ] = None,
) -> None:
    if text is None:
        text = open_editor_for_text()
        if text is None:
            typer.echo("Note creation cancelled (no text provided)")
            return

    note = NOTE_STORE.add_note(folder)
    NOTE_STORE.update_note(note["id"], text)

    new_note = NOTE_STORE.get_note(note["id"])
    if new_note is not None:
        note_report.single_note_report(new_note)


@app.command("list, ls")
def list_notes(
    folder: Annotated[
        Optional[str],
        typer.Option("--folder", "-f", help="only notes in this folder"),
    ] = None,
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="case-insensitive text to look for"),
    ] = "",
) -> None:
    notes = NOTE_STORE.query(search, folder)
    selected = NOTE_STORE.selected_note
    note_report.notes_report(
        "notes",
        notes,
        folder,
        selected["id"] if selected is not None else None,
    )


@app.command("show, sh")
def show(
    id: Annotated[
        Optional[str],
        typer.Argument(help="note id or unique prefix; defaults to the latest note"),
    ] = None,
) -> None:
    if id is None:
        note = NOTE_STORE.selected_note
        if note is None:
            typer.echo("No notes")
            return
    else:
        note = NOTE_STORE.get_note(resolve_note_id(NOTE_STORE, id))
        if note is None:
            raise typer.BadParameter(f"no note with id '{id}'")

    note_report.single_note_report(note)


@app.command("edit, e", no_args_is_help=True)
def edit(
    id: str,
    text: Annotated[
        Optional[str],
        typer.Option("--text", "-t", help="replacement text; opens $EDITOR when omitted"),
    ] = None,
) -> None:
    note_id = resolve_note_id(NOTE_STORE, id)
    note = NOTE_STORE.get_note(note_id)
    if note is None:
        raise typer.BadParameter(f"no note with id '{id}'")

    if text is None:
        text = open_editor_for_text(note["body"])
        if text is None:
            typer.echo("Text editing cancelled")
            return

    rich_text = note["rich_text"]
    if rich_text is not None and text != note["body"]:
        # the formatting no longer matches the plain text
        typer.echo("Rich text formatting was removed from this note")
        rich_text = None

    NOTE_STORE.update_note(note_id, text, rich_text)

    edited = NOTE_STORE.get_note(note_id)
    if edited is not None:
        note_report.single_note_report(edited)


@app.command("move, mv", no_args_is_help=True)
def move(
    id: str,
    folder: Annotated[str, typer.Argument(help="target folder, created if missing")],
) -> None:
    note_id = resolve_note_id(NOTE_STORE, id)
    NOTE_STORE.move_note(note_id, folder)

    moved = NOTE_STORE.get_note(note_id)
    if moved is not None:
        note_report.single_note_report(moved)


@app.command("delete, d", no_args_is_help=True)
def delete(
    id: str,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="do not ask for confirmation")
    ] = False,
) -> None:
    note_id = resolve_note_id(NOTE_STORE, id)
    note = NOTE_STORE.get_note(note_id)
    if note is None:
        raise typer.BadParameter(f"no note with id '{id}'")

    if not yes:
        title = title_line(note)
        label = f'"{title}"' if title != "" else "this note"
        confirm = typer.confirm(f"Delete {label}?", default=False)
        if not confirm:
            typer.echo("Note deletion cancelled")
            return

    NOTE_STORE.delete_note(note_id)
    typer.echo(f"Deleted note {note_report.short_id(note_id)}")
