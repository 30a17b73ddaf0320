# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from macnotes.model.note import Note
from macnotes.view.views.header import header


def folders_report(folders: list[str], notes: list[Note]) -> None:
    header("folders")

    counts: dict[str, int] = {folder: 0 for folder in folders}
    for note in notes:
        counts[note["folder"]] = counts.get(note["folder"], 0) + 1

    folders_table = Table(box=box.SIMPLE)
    folders_table.add_column("folder")
    folders_table.add_column("notes", justify="right")

    for folder in folders:
        folders_table.add_row(escape(folder), str(counts[folder]))

    console = Console()
    console.print(folders_table)
