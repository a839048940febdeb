# SPDX-License-Identifier: MIT

from trifecta.color import BADGE_FILL_COLOR, CARD_BORDER_COLOR, TEXT_COLOR, TODAY_COLOR
from trifecta.configuration import TrifectaEncoding
from trifecta.model.view import ViewData, ViewParams
from trifecta.model.visual import Canvas, Node
from trifecta.service.geometry import (
    get_text_scale,
    get_year_grid_layout,
    is_portrait,
    scaled,
)
from trifecta.view.views.progress import (
    build_dot_grid,
    build_footer,
    build_period_cells,
    get_dot_decorator,
    new_canvas,
    text,
)

DAYS_LEFT_LABEL = "DAYS LEFT"


def compose_yearly_view(
    params: ViewParams, data: ViewData, encoding: TrifectaEncoding = "slices"
) -> Canvas:
    """
    One dot per day of the year with a days-left badge over the grid.

    Past days are white, today is the accent color and future days are dim.
    With a completion map, days that have a todo file become Trifecta dots.
    """
    now, width, height = params["date"], params["width"], params["height"]
    portrait = is_portrait(width, height)
    scale = get_text_scale(width, height)

    progress, cells = build_period_cells(now, "year")
    layout = get_year_grid_layout(width, height, progress["total"])

    origin_x = (width - layout["grid_width"]) / 2
    origin_y = layout["padding_top"]

    canvas = new_canvas(width, height)
    canvas["nodes"].extend(
        build_dot_grid(
            layout,
            origin_x,
            origin_y,
            cells,
            get_dot_decorator(data["completion_map"], encoding),
        )
    )
    canvas["nodes"].extend(
        _build_days_left_badge(
            width / 2,
            origin_y + layout["grid_height"] / 2,
            progress["remaining"],
            portrait,
            scale,
        )
    )
    canvas["nodes"].append(build_footer(width, height, progress, "YEAR", scale))
    return canvas


def _build_days_left_badge(
    center_x: float, center_y: float, days_left: int, portrait: bool, scale: float
) -> list[Node]:
    number_size = scaled(180 if portrait else 140, scale)
    label_size = scaled(40 if portrait else 32, scale)
    label_margin = 10 * scale
    padding_y = (50 if portrait else 40) * scale
    padding_x = (70 if portrait else 60) * scale

    # Approximate glyph widths; the badge only needs to enclose the text
    number_width = len(str(days_left)) * number_size * 0.6
    label_width = len(DAYS_LEFT_LABEL) * label_size * 0.8
    content_width = max(number_width, label_width)
    content_height = number_size + label_margin + label_size

    badge_width = content_width + 2 * padding_x
    badge_height = content_height + 2 * padding_y
    top = center_y - content_height / 2

    return [
        {
            "kind": "rect",
            "x": center_x - badge_width / 2,
            "y": center_y - badge_height / 2,
            "width": badge_width,
            "height": badge_height,
            "fill": BADGE_FILL_COLOR,
            "radius": 50 * scale,
            "outline": CARD_BORDER_COLOR,
            "outline_width": 1,
        },
        text(
            center_x,
            top + number_size / 2,
            str(days_left),
            number_size,
            TEXT_COLOR,
            bold=True,
        ),
        text(
            center_x,
            top + number_size + label_margin + label_size / 2,
            DAYS_LEFT_LABEL,
            label_size,
            TODAY_COLOR,
            bold=True,
        ),
    ]
