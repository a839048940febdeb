# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from trifecta.color import CATEGORY_BASE_RGB
from trifecta.model.todo import CATEGORIES, CategoryProgress
from trifecta.repository.configuration import CONFIGURATION_REPO
from trifecta.repository.todo import TODO_REPO
from trifecta.service.completion import get_todo_completion_map
from trifecta.terminal.parse import parse_month


def _progress_cell(progress: CategoryProgress, color: str) -> Text:
    if progress["total"] == 0:
        return Text("-", style="dim")
    return Text(
        f"{progress['done']}/{progress['total']} ({progress['percentage']:.0f}%)",
        style=color,
    )


def todos(
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", help="only show this month, YYYY-MM"),
    ] = None,
) -> None:
    """Summarize completion of every stored daily todo file."""
    config = CONFIGURATION_REPO.get_config()
    month_start = parse_month(month, config["default_timezone"])

    completion_map = get_todo_completion_map(TODO_REPO)
    if month_start is not None:
        prefix = month_start.format("YYYY-MM-")
        completion_map = {
            key: value for key, value in completion_map.items() if key.startswith(prefix)
        }

    console = Console()
    if not completion_map:
        console.print(f"No todo files found in {TODO_REPO.todos_dir}")
        return

    table = Table(title="Trifecta completion")
    table.add_column("Date", style="cyan")
    for category in CATEGORIES:
        table.add_column(category.capitalize())
    table.add_column("Deadline")

    for key in sorted(completion_map):
        completion = completion_map[key]
        row: list[str | Text] = [key]
        for category in CATEGORIES:
            r, g, b = CATEGORY_BASE_RGB[category]
            row.append(_progress_cell(completion[category], f"rgb({r},{g},{b})"))
        row.append(Text("!", style="bold red") if completion["is_deadline"] else "")
        table.add_row(*row)

    console.print(table)
