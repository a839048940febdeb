# SPDX-License-Identifier: MIT

from typing import Callable, Literal, Optional

import pendulum

from trifecta.color import (
    BACKGROUND_COLOR,
    DEADLINE_COLOR,
    FUTURE_COLOR,
    MUTED_TEXT_COLOR,
    PAST_COLOR,
    TODAY_COLOR,
    get_blended_color,
    get_trifecta_colors,
    with_alpha,
)
from trifecta.configuration import TrifectaEncoding
from trifecta.model.todo import CATEGORIES, TodoCompletionMap, TrifectaCompletion
from trifecta.model.view import GridLayout, Progress
from trifecta.model.visual import Canvas, CircleNode, Color, Node, TextNode
from trifecta.service.geometry import get_cell_origin, scaled
from trifecta.service.progress import get_period_progress
from trifecta.time import date_key

DotState = Literal["past", "today", "future"]

# Periods drawn as one dot per day
CalendarPeriod = Literal["year", "month"]

# (date_key, state, cx, cy, r) -> nodes for one grid cell
DotDecorator = Callable[[str, DotState, float, float, float], list[Node]]

DOT_STATE_COLORS: dict[DotState, Color] = {
    "past": PAST_COLOR,
    "today": TODAY_COLOR,
    "future": FUTURE_COLOR,
}

# Angle of 12 o'clock in Pillow's clockwise-from-3-o'clock convention
TOP_ANGLE = -90.0

TODAY_RING_RATIO = 0.18
BLEND_MIN_ALPHA = 0.3

FOOTER_FONT_SIZE = 32
FOOTER_MARGIN_BOTTOM = 100


def new_canvas(width: int, height: int) -> Canvas:
    return {
        "width": width,
        "height": height,
        "background": BACKGROUND_COLOR,
        "nodes": [],
    }


def get_dot_state(index: int, today_index: int) -> DotState:
    if index < today_index:
        return "past"
    elif index == today_index:
        return "today"
    return "future"


def build_period_cells(
    now: pendulum.DateTime, period: CalendarPeriod
) -> tuple[Progress, list[tuple[str, DotState]]]:
    """
    Progress of ``period`` and one (date_key, state) cell per day in it.

    Cells run from the first day of the period; today is the last elapsed day.
    """
    progress = get_period_progress(now, period)
    start = now.start_of(period)
    today_index = progress["elapsed"] - 1
    cells: list[tuple[str, DotState]] = [
        (date_key(start.add(days=i)), get_dot_state(i, today_index))
        for i in range(progress["total"])
    ]
    return progress, cells


def circle(cx: float, cy: float, r: float, fill: Color) -> CircleNode:
    return {"kind": "circle", "cx": cx, "cy": cy, "r": r, "fill": fill}


def text(
    x: float,
    y: float,
    value: str,
    size: int,
    fill: Color,
    bold: bool = False,
    anchor: str = "mm",
    strikethrough: bool = False,
) -> TextNode:
    node: TextNode = {
        "kind": "text",
        "x": x,
        "y": y,
        "text": value,
        "size": size,
        "weight": 700 if bold else 400,
        "fill": fill,
        "anchor": anchor,  # type: ignore[typeddict-item]
    }
    if strikethrough:
        node["strikethrough"] = True
    return node


def get_plain_dot(
    date_key: str, state: DotState, cx: float, cy: float, r: float
) -> list[Node]:
    return [circle(cx, cy, r, DOT_STATE_COLORS[state])]


def get_trifecta_slices(
    completion: TrifectaCompletion, cx: float, cy: float, r: float
) -> list[Node]:
    """
    Split a dot into angular slices, one per category with tasks.

    Each slice spans the category's share of the day's tasks and is colored
    by that category's completion percentage.
    """
    total_tasks = sum(completion[category]["total"] for category in CATEGORIES)
    if total_tasks <= 0:
        return []

    colors = get_trifecta_colors(completion)
    nodes: list[Node] = [circle(cx, cy, r, FUTURE_COLOR)]
    start_angle = TOP_ANGLE
    for category in CATEGORIES:
        progress = completion[category]
        if progress["total"] <= 0:
            continue
        share = min(1.0, progress["total"] / total_tasks)
        sweep = 360.0 * share
        nodes.append(
            {
                "kind": "pie",
                "cx": cx,
                "cy": cy,
                "r": r,
                "start_angle": start_angle,
                "end_angle": start_angle + sweep,
                "fill": colors[category],
            }
        )
        start_angle += sweep
    return nodes


def get_trifecta_blend(
    completion: TrifectaCompletion, cx: float, cy: float, r: float
) -> list[Node]:
    blended = get_blended_color(completion)
    if blended["is_empty"]:
        return []
    alpha = BLEND_MIN_ALPHA + (1 - BLEND_MIN_ALPHA) * blended["intensity"]
    return [
        circle(cx, cy, r, FUTURE_COLOR),
        circle(cx, cy, r, with_alpha(blended["color"], alpha)),
    ]


TRIFECTA_ENCODERS: dict[
    TrifectaEncoding, Callable[[TrifectaCompletion, float, float, float], list[Node]]
] = {
    "slices": get_trifecta_slices,
    "blended": get_trifecta_blend,
}


def get_trifecta_dot_decorator(
    completion_map: TodoCompletionMap, encoding: TrifectaEncoding = "slices"
) -> DotDecorator:
    """
    Build a decorator drawing Trifecta dots for every date in ``completion_map``.

    Deadline days are a solid alert dot regardless of completion. Dates
    without data (or with an empty checklist) fall back to the plain dot.
    Today always gets an accent ring.
    """
    encode = TRIFECTA_ENCODERS[encoding]

    def decorate(
        date_key: str, state: DotState, cx: float, cy: float, r: float
    ) -> list[Node]:
        completion = completion_map.get(date_key)

        nodes: list[Node] = []
        if completion is not None:
            if completion["is_deadline"]:
                nodes = [circle(cx, cy, r, DEADLINE_COLOR)]
            else:
                nodes = encode(completion, cx, cy, r)
        if not nodes:
            nodes = get_plain_dot(date_key, state, cx, cy, r)

        if state == "today":
            ring: CircleNode = circle(cx, cy, r, (0, 0, 0, 0))
            ring["outline"] = TODAY_COLOR
            ring["outline_width"] = max(2, round(r * TODAY_RING_RATIO))
            nodes.append(ring)
        return nodes

    return decorate


def get_dot_decorator(
    completion_map: Optional[TodoCompletionMap],
    encoding: TrifectaEncoding = "slices",
) -> DotDecorator:
    if completion_map:
        return get_trifecta_dot_decorator(completion_map, encoding)
    return get_plain_dot


def build_dot_grid(
    layout: GridLayout,
    origin_x: float,
    origin_y: float,
    cells: list[tuple[str, DotState]],
    get_dot: DotDecorator,
) -> list[Node]:
    """
    Lay out one dot per cell, row by row, after the layout's leading cells.

    Args:
        layout: Grid geometry from the geometry engine
        origin_x: Left edge of the grid on the canvas
        origin_y: Top edge of the grid on the canvas
        cells: (date_key, state) per day, in calendar order
        get_dot: Callback producing the nodes of one dot
    """
    radius = layout["dot_size"] / 2
    nodes: list[Node] = []
    for i, (date_key, state) in enumerate(cells):
        offset_x, offset_y = get_cell_origin(layout, i + layout["leading_cells"])
        cx = origin_x + offset_x + radius
        cy = origin_y + offset_y + radius
        nodes.extend(get_dot(date_key, state, cx, cy, radius))
    return nodes


def build_footer(
    width: int, height: int, progress: Progress, unit: str, scale: float
) -> TextNode:
    return text(
        width / 2,
        height - FOOTER_MARGIN_BOTTOM * scale,
        f"{progress['label']}% OF {unit} PASSED",
        scaled(FOOTER_FONT_SIZE, scale),
        MUTED_TEXT_COLOR,
        anchor="ms",
    )


def get_footer_reserve(scale: float) -> float:
    """Height kept free at the bottom of the canvas for the footer line."""
    return (FOOTER_MARGIN_BOTTOM + FOOTER_FONT_SIZE * 2) * scale
