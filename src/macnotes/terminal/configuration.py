# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from macnotes import configuration
from macnotes.repository.configuration import CONFIGURATION_REPO
from macnotes.terminal.custom_typer import AliasedTyperGroup
from macnotes.terminal.parse import parse_log_level

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __configuration_table(config: configuration.Configuration, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "data_path",
        config["data_path"] if config["data_path"] else "None (platform default)",
    )
    table.add_row("notes_dir", str(configuration.DATA_NOTES_DIR))
    table.add_row("save_delay_ms", str(config["save_delay_ms"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(__configuration_table(config, "Configuration"))
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory for note files (a notes/ folder is created inside)",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    save_delay_ms: Annotated[
        Optional[int],
        typer.Option(
            "--save-delay-ms",
            min=0,
            help="Quiet period before edits are written to disk",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above reports",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        save_delay_ms=save_delay_ms,
        show_header=show_header,
        log_level=parse_log_level(log_level),
    )

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(__configuration_table(config, "Updated Configuration"))
