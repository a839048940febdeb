# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from trifecta import configuration
from trifecta.repository.configuration import CONFIGURATION_REPO
from trifecta.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

VALID_ENCODINGS = ["slices", "blended"]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    for key, value in config.items():
        if isinstance(value, bool):
            table.add_row(key, "✓ Enabled" if value else "✗ Disabled")
        else:
            table.add_row(key, "None" if value is None else str(value))
    table.add_row("todos_dir", str(configuration.DATA_TODOS_DIR))

    console.print(table)
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set_config(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory holding the todos/ folder"),
    ] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="use the default data path")
    ] = False,
    default_timezone: Annotated[
        Optional[str], typer.Option("--tz", help="default IANA timezone")
    ] = None,
    show_trifecta: Annotated[
        Optional[bool],
        typer.Option("--trifecta/--no-trifecta", help="draw Trifecta dots"),
    ] = None,
    trifecta_encoding: Annotated[
        Optional[str],
        typer.Option("--encoding", help="slices or blended"),
    ] = None,
    fetch_quotes: Annotated[
        Optional[bool],
        typer.Option("--quotes/--no-quotes", help="fetch quotes from the network"),
    ] = None,
    font_regular_path: Annotated[
        Optional[str], typer.Option("--font", help="TTF for regular text")
    ] = None,
    font_bold_path: Annotated[
        Optional[str], typer.Option("--font-bold", help="TTF for bold text")
    ] = None,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ...")
    ] = None,
) -> None:
    """Update configuration settings."""
    if trifecta_encoding is not None and trifecta_encoding not in VALID_ENCODINGS:
        typer.echo(
            f"Invalid encoding: {trifecta_encoding}. Valid options: {', '.join(VALID_ENCODINGS)}"
        )
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        default_timezone=default_timezone,
        show_trifecta=show_trifecta,
        trifecta_encoding=trifecta_encoding,  # type: ignore[arg-type]
        fetch_quotes=fetch_quotes,
        font_regular_path=font_regular_path,
        font_bold_path=font_bold_path,
        log_level=log_level,
    )
