# SPDX-License-Identifier: MIT

from trifecta.color import CARD_BORDER_COLOR, CARD_FILL_COLOR, TEXT_COLOR, TODAY_COLOR
from trifecta.configuration import TrifectaEncoding
from trifecta.model.view import ViewData, ViewParams
from trifecta.model.visual import Canvas
from trifecta.service.geometry import (
    get_cell_origin,
    get_month_grid_layout,
    get_text_scale,
    scaled,
)
from trifecta.time import month_to_display_str
from trifecta.view.views.progress import (
    build_dot_grid,
    build_footer,
    build_period_cells,
    get_dot_decorator,
    get_footer_reserve,
    new_canvas,
    text,
)

WEEKDAY_HEADERS = ("M", "T", "W", "T", "F", "S", "S")

TITLE_FONT_SIZE = 48
TITLE_MARGIN = 50
HEADER_FONT_SIZE = 32
HEADER_MARGIN = 30
CARD_PADDING_Y = 60
CARD_PADDING_X = 40
CARD_RADIUS = 60


def compose_monthly_view(
    params: ViewParams, data: ViewData, encoding: TrifectaEncoding = "slices"
) -> Canvas:
    """The current month as a Monday-first week grid inside a centered card."""
    now, width, height = params["date"], params["width"], params["height"]
    scale = get_text_scale(width, height)

    progress, cells = build_period_cells(now, "month")
    month_start = now.start_of("month")
    layout = get_month_grid_layout(width, height, month_start.date(), progress["total"])

    title_size = scaled(TITLE_FONT_SIZE, scale)
    header_size = scaled(HEADER_FONT_SIZE, scale)
    title_margin = TITLE_MARGIN * scale
    header_margin = HEADER_MARGIN * scale
    padding_y = CARD_PADDING_Y * scale
    padding_x = CARD_PADDING_X * scale

    card_width = layout["grid_width"] + 2 * padding_x
    card_height = (
        padding_y
        + title_size
        + title_margin
        + header_size
        + header_margin
        + layout["grid_height"]
        + padding_y
    )

    # Center the card between the clock safe zone and the footer
    region_top = layout["padding_top"]
    region_bottom = height - get_footer_reserve(scale)
    card_top = max(region_top, region_top + (region_bottom - region_top - card_height) / 2)
    card_left = (width - card_width) / 2

    canvas = new_canvas(width, height)
    nodes = canvas["nodes"]
    nodes.append(
        {
            "kind": "rect",
            "x": card_left,
            "y": card_top,
            "width": card_width,
            "height": card_height,
            "fill": CARD_FILL_COLOR,
            "radius": CARD_RADIUS * scale,
            "outline": CARD_BORDER_COLOR,
            "outline_width": 1,
        }
    )

    cursor_y = card_top + padding_y
    nodes.append(
        text(
            width / 2,
            cursor_y + title_size / 2,
            month_to_display_str(now),
            title_size,
            TEXT_COLOR,
            bold=True,
        )
    )
    cursor_y += title_size + title_margin

    grid_left = card_left + padding_x
    for i, header in enumerate(WEEKDAY_HEADERS):
        offset_x, _ = get_cell_origin(layout, i)
        nodes.append(
            text(
                grid_left + offset_x + layout["dot_size"] / 2,
                cursor_y + header_size / 2,
                header,
                header_size,
                TODAY_COLOR,
                bold=True,
            )
        )
    cursor_y += header_size + header_margin

    nodes.extend(
        build_dot_grid(
            layout,
            grid_left,
            cursor_y,
            cells,
            get_dot_decorator(data["completion_map"], encoding),
        )
    )

    nodes.append(build_footer(width, height, progress, "MONTH", scale))
    return canvas
