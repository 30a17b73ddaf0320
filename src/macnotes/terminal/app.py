# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from macnotes.terminal import configuration, folder, note
from macnotes.terminal.custom_typer import OrderedAliasedTyperGroup
from macnotes.terminal.search import search
from macnotes.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="macnotes - quick notes kept as plain files",
    no_args_is_help=True,
)
app.add_typer(note.app, name="note, n")
app.add_typer(folder.app, name="folder, f")
app.add_typer(configuration.app, name="config, c")
app.command(name="search, s")(search)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    macnotes - quick notes kept as plain files

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
