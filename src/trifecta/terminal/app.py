# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from trifecta.logger import configure_logging
from trifecta.terminal import configuration
from trifecta.terminal.custom_typer import OrderedAliasedTyperGroup
from trifecta.terminal.render import render
from trifecta.terminal.serve import serve
from trifecta.terminal.todo import todos

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Trifecta - Time-progress and task wallpapers",
    no_args_is_help=True,
)
app.command(name="render, r")(render)
app.command(name="serve, s")(serve)
app.command(name="todos, t")(todos)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-l", help="override the configured log level"),
    ] = None,
) -> None:
    """
    Trifecta - Time-progress and task wallpapers

    Global options that apply to all commands.
    """
    if log_level is not None:
        configure_logging(log_level)


def run() -> None:
    app()
