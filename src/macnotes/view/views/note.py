# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from macnotes.model.entity_id import EntityId
from macnotes.model.note import Note, title_line
from macnotes.time import (
    datetime_to_display_local_datetime_str,
    datetime_to_relative_str,
)
from macnotes.view.views.header import header

SHORT_ID_LENGTH = 8


def short_id(id: EntityId) -> str:
    return id[:SHORT_ID_LENGTH]


def notes_report(
    report_name: str,
    notes: list[Note],
    folder: Optional[str] = None,
    selected_id: Optional[EntityId] = None,
    columns: list[str] = ["id", "folder", "title", "updated"],
) -> None:
    header(report_name, folder)

    notes_table = Table(box=box.SIMPLE)
    notes_table.add_column("")
    for column in columns:
        if column == "title":
            notes_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            notes_table.add_column(column)

    for note in notes:
        row = ["*" if note["id"] == selected_id else ""]
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = short_id(note["id"])
            elif column == "folder":
                column_value = escape(note["folder"])
            elif column == "title":
                column_value = escape(title_line(note)) or "[dim]untitled[/dim]"
            elif column == "updated":
                column_value = datetime_to_relative_str(note["updated"])
            elif column == "created":
                column_value = datetime_to_display_local_datetime_str(note["created"])
            row.append(column_value)
        notes_table.add_row(*row)

    console = Console()
    if len(notes) == 0:
        console.print(" no notes")
        return
    console.print(notes_table)


def single_note_report(note: Note) -> None:
    header("note", note["folder"])

    note_table = Table(box=box.SIMPLE, show_header=False)
    note_table.add_column("property")
    note_table.add_column("value")

    note_table.add_row("id", note["id"])
    note_table.add_row("folder", escape(note["folder"]))
    note_table.add_row("title", escape(title_line(note)))
    note_table.add_row(
        "created", datetime_to_display_local_datetime_str(note["created"])
    )
    note_table.add_row(
        "updated", datetime_to_display_local_datetime_str(note["updated"])
    )
    note_table.add_row("rich text", "yes" if note["rich_text"] is not None else "no")

    console = Console()
    console.print(note_table)
    console.print(Panel(escape(note["body"]), box=box.ROUNDED))
