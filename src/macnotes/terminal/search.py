# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from macnotes.store import NOTE_STORE
from macnotes.view.views.note import notes_report


def search(
    query: Annotated[str, typer.Argument(help="Search query string")],
    folder: Annotated[
        Optional[str],
        typer.Option("--folder", "-f", help="only search this folder"),
    ] = None,
) -> None:
    notes = NOTE_STORE.query(query, folder)
    notes_report(f"search: {query}", notes, folder)
