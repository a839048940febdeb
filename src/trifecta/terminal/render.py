# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from trifecta.render.png import RenderError
from trifecta.repository.configuration import CONFIGURATION_REPO
from trifecta.repository.todo import TODO_REPO
from trifecta.service.quote import QuoteClient
from trifecta.service.wallpaper import render_wallpaper
from trifecta.terminal.parse import parse_datetime

console = Console()


def render(
    output: Annotated[Path, typer.Argument(help="PNG file to write")],
    width: Annotated[
        Optional[int], typer.Option("--width", "-w", min=1, help="Image width")
    ] = None,
    height: Annotated[
        Optional[int], typer.Option("--height", "-h", min=1, help="Image height")
    ] = None,
    view: Annotated[
        Optional[str],
        typer.Option(
            "--view",
            "-v",
            help="yearly, monthly or day; rotates by minute of the hour if omitted",
        ),
    ] = None,
    tz: Annotated[
        Optional[str], typer.Option("--tz", help="IANA timezone, e.g. Europe/Paris")
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-d",
            help="render for this moment instead of now: YYYY-MM-DD[ HH:mm], today, -1",
        ),
    ] = None,
) -> None:
    """Render the wallpaper to a PNG file."""
    config = CONFIGURATION_REPO.get_config()
    now = parse_datetime(date, tz or config["default_timezone"])

    quote_client = None
    if config["fetch_quotes"]:
        quote_client = QuoteClient(
            config["quote_url"],
            timeout_seconds=config["quote_timeout_seconds"],
            cache_seconds=config["quote_cache_seconds"],
        )

    try:
        png = render_wallpaper(
            config,
            TODO_REPO,
            width=width,
            height=height,
            view=view,
            tz=tz,
            now=now,
            quote_client=quote_client,
        )
    except RenderError as e:
        typer.echo(f"Error generating wallpaper: {e}", err=True)
        raise typer.Exit(1)

    output.write_bytes(png)
    console.print(f"Wrote [bold]{output}[/bold] ({len(png)} bytes)")
