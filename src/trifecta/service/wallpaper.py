# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from trifecta.configuration import Configuration
from trifecta.model.view import ViewData, ViewKind, ViewParams
from trifecta.render.png import FontSet, render_to_png
from trifecta.repository.todo import TodoRepository
from trifecta.service.completion import get_todo_completion_map, get_todos_for_date
from trifecta.service.quote import QuoteClient, get_quote
from trifecta.service.todo import count_tasks
from trifecta.time import date_key, resolve_now
from trifecta.view.dispatch import compose_view, empty_view_data
from trifecta.view.rotation import select_view
from trifecta.view.views.day import QUOTE_TASK_LIMIT

logger = logging.getLogger(__name__)


def get_font_set(config: Configuration) -> FontSet:
    return {
        "regular": config["font_regular_path"],
        "bold": config["font_bold_path"],
    }


def build_view_data(
    kind: ViewKind,
    now: pendulum.DateTime,
    config: Configuration,
    repository: TodoRepository,
    quote_client: Optional[QuoteClient],
) -> ViewData:
    """
    Gather the optional data a view needs: completion map, today's todos, quote.

    Every source degrades to "no data" on failure.
    """
    data = empty_view_data()

    if kind in (ViewKind.YEARLY, ViewKind.MONTHLY):
        if config["show_trifecta"]:
            data["completion_map"] = get_todo_completion_map(repository)
    else:
        parsed = get_todos_for_date(repository, date_key(now))
        if parsed is not None:
            data["todos"] = parsed["tasks"]
        # The day view hides the quote above QUOTE_TASK_LIMIT tasks
        if parsed is None or count_tasks(parsed["tasks"]) <= QUOTE_TASK_LIMIT:
            data["quote"] = get_quote(quote_client if config["fetch_quotes"] else None)

    return data


def render_wallpaper(
    config: Configuration,
    repository: TodoRepository,
    width: Optional[int] = None,
    height: Optional[int] = None,
    view: Optional[str] = None,
    tz: Optional[str] = None,
    now: Optional[pendulum.DateTime] = None,
    quote_client: Optional[QuoteClient] = None,
) -> bytes:
    """
    Resolve the time and view, compose it, and rasterize it to PNG bytes.

    Args:
        config: Active configuration (supplies defaults for missing arguments)
        repository: Source of the daily todo files
        width: Image width in pixels
        height: Image height in pixels
        view: View selector; None or unknown rotates by minute of the hour
        tz: IANA timezone name used to resolve the current time
        now: Fixed time to render instead of the current time
        quote_client: Remote quote source for the day view

    Raises:
        RenderError: if rasterization fails
    """
    width = width if width is not None else config["default_width"]
    height = height if height is not None else config["default_height"]
    if now is None:
        now = resolve_now(tz if tz is not None else config["default_timezone"])

    kind = select_view(now, view, config["rotation_interval_minutes"])
    logger.debug("Rendering %s view at %sx%s for %s", kind.name, width, height, now)

    data = build_view_data(kind, now, config, repository, quote_client)
    params: ViewParams = {"date": now, "width": width, "height": height}
    canvas = compose_view(kind, params, data, config["trifecta_encoding"])

    return render_to_png(canvas, width, height, get_font_set(config))
