# SPDX-License-Identifier: MIT

import typer

from macnotes.store import NOTE_STORE
from macnotes.terminal.custom_typer import AliasedTyperGroup
from macnotes.view.views.folder import folders_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(name: str) -> None:
    folder = NOTE_STORE.add_folder(name)
    if folder is None:
        raise typer.BadParameter("folder name cannot be blank")

    folders_report(NOTE_STORE.folders, NOTE_STORE.notes)


@app.command("list, ls")
def list_folders() -> None:
    folders_report(NOTE_STORE.folders, NOTE_STORE.notes)
