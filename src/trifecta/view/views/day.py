# SPDX-License-Identifier: MIT

import math
import textwrap
from typing import Optional

from trifecta.color import (
    CARD_BORDER_COLOR,
    CARD_FILL_COLOR,
    CATEGORY_BASE_RGB,
    CHECKBOX_BORDER_COLOR,
    FUTURE_COLOR,
    QUOTE_TEXT_COLOR,
    TEXT_COLOR,
    TODAY_COLOR,
    with_alpha,
)
from trifecta.configuration import TrifectaEncoding
from trifecta.model.quote import Quote
from trifecta.model.todo import CATEGORIES, CategorizedTodos, Category, TodoTask
from trifecta.model.view import ViewData, ViewParams
from trifecta.model.visual import Canvas, Node, RingNode
from trifecta.service.geometry import (
    CLOCK_SAFE_ZONE,
    get_dash_offset,
    get_ring_layout,
    get_text_scale,
    scaled,
)
from trifecta.service.progress import get_day_progress
from trifecta.service.todo import count_tasks
from trifecta.time import time_to_display_str
from trifecta.view.views.progress import (
    TOP_ANGLE,
    build_footer,
    get_footer_reserve,
    new_canvas,
    text,
)

# More tasks than this and the quote is dropped to keep the checklist readable
QUOTE_TASK_LIMIT = 3

OBJECTIVES_TITLE = "DAILY OBJECTIVES"
DONE_ALPHA = 0.4
# Rough average glyph width relative to font size, used for wrapping
GLYPH_WIDTH_RATIO = 0.55
ELLIPSIS = "..."


def should_show_quote(quote: Optional[Quote], todos: Optional[CategorizedTodos]) -> bool:
    """Tasks take precedence over the quote once there are more than three."""
    if quote is None:
        return False
    if todos is None:
        return True
    return count_tasks(todos) <= QUOTE_TASK_LIMIT


def compose_day_view(
    params: ViewParams, data: ViewData, encoding: TrifectaEncoding = "slices"
) -> Canvas:
    """
    Progress ring for the day, with today's checklist and a quote below it.

    The quote is hidden when more than three tasks are listed.
    """
    now, width, height = params["date"], params["width"], params["height"]
    scale = get_text_scale(width, height)
    progress = get_day_progress(now)

    todos = data["todos"]
    if todos is not None and count_tasks(todos) == 0:
        todos = None
    quote = data["quote"] if should_show_quote(data["quote"], todos) else None

    canvas = new_canvas(width, height)
    nodes = canvas["nodes"]

    ring = get_ring_layout(width, height, todos is not None)
    center_x = width / 2
    ring_top = height * CLOCK_SAFE_ZONE
    center_y = ring_top + ring["size"] / 2

    track: RingNode = {
        "kind": "ring",
        "cx": center_x,
        "cy": center_y,
        "r": ring["radius"],
        "stroke": FUTURE_COLOR,
        "stroke_width": ring["stroke_width"],
        "dash_array": ring["circumference"],
        "dash_offset": 0.0,
        "start_angle": TOP_ANGLE,
    }
    indicator: RingNode = {
        **track,  # type: ignore[typeddict-item]
        "stroke": TODAY_COLOR,
        "dash_offset": get_dash_offset(ring["circumference"], progress["percentage"]),
    }
    nodes.append(track)
    nodes.append(indicator)
    nodes.append(
        text(
            center_x,
            center_y,
            f"{math.floor(progress['percentage'])}%",
            max(1, round(ring["size"] * 0.25)),
            TEXT_COLOR,
            bold=True,
        )
    )

    time_size = scaled(24, scale)
    cursor_y = ring_top + ring["size"] + 30 * scale
    nodes.append(
        text(
            center_x,
            cursor_y,
            time_to_display_str(now),
            time_size,
            TODAY_COLOR,
            bold=True,
            anchor="ma",
        )
    )
    cursor_y += time_size

    content_bottom = height - get_footer_reserve(scale)
    is_wider = width / height > 0.7

    if todos is not None:
        card_nodes, cursor_y = _build_objectives_card(
            todos, width, cursor_y + 40 * scale, content_bottom, is_wider, scale
        )
        nodes.extend(card_nodes)

    if quote is not None:
        nodes.extend(
            _build_quote(
                quote,
                width,
                cursor_y + (40 if todos is not None else 60) * scale,
                content_bottom,
                is_wider,
                todos is not None,
                scale,
            )
        )

    nodes.append(build_footer(width, height, progress, "DAY", scale))
    return canvas


def truncate_to_width(value: str, max_chars: int) -> str:
    if len(value) <= max_chars:
        return value
    if max_chars <= len(ELLIPSIS):
        return value[: max(max_chars, 1)]
    return value[: max_chars - len(ELLIPSIS)].rstrip() + ELLIPSIS


def _build_objectives_card(
    todos: CategorizedTodos,
    width: int,
    top: float,
    bottom: float,
    is_wider: bool,
    scale: float,
) -> tuple[list[Node], float]:
    """
    Build the grouped checklist card.

    Items that do not fit above ``bottom`` are summarized in a "+N MORE" line.

    Returns:
        Tuple of (nodes, y coordinate just below the card)
    """
    card_width = width * (0.6 if is_wider else 0.85)
    card_left = (width - card_width) / 2
    padding_y = 40 * scale
    padding_x = 60 * scale
    title_size = scaled(28, scale)
    title_margin = 30 * scale
    group_size = scaled(22, scale)
    group_margin = 12 * scale
    item_size = scaled(36, scale)
    item_gap = 20 * scale
    box_size = scaled(32, scale)
    box_margin = 24 * scale

    inner_width = card_width - 2 * padding_x
    max_chars = int((inner_width - box_size - box_margin) / (item_size * GLYPH_WIDTH_RATIO))

    groups: list[tuple[Category, list[TodoTask]]] = [
        (category, todos[category]) for category in CATEGORIES if todos[category]
    ]
    total_items = sum(len(tasks) for _, tasks in groups)

    content: list[Node] = []
    cursor_y = top + padding_y
    content.append(
        text(
            card_left + padding_x,
            cursor_y,
            OBJECTIVES_TITLE,
            title_size,
            with_alpha(TODAY_COLOR, 0.8),
            bold=True,
            anchor="la",
        )
    )
    cursor_y += title_size + title_margin

    shown = 0
    limit_y = bottom - padding_y
    overflow = False
    for category, tasks in groups:
        if cursor_y + group_size + group_margin + item_size > limit_y:
            overflow = True
            break
        base_r, base_g, base_b = CATEGORY_BASE_RGB[category]
        content.append(
            text(
                card_left + padding_x,
                cursor_y,
                category.upper(),
                group_size,
                (base_r, base_g, base_b, 255),
                bold=True,
                anchor="la",
            )
        )
        cursor_y += group_size + group_margin

        for task in tasks:
            if cursor_y + item_size > limit_y:
                overflow = True
                break
            content.extend(
                _build_task_row(
                    task,
                    card_left + padding_x,
                    cursor_y,
                    item_size,
                    box_size,
                    box_margin,
                    max_chars,
                    scale,
                )
            )
            cursor_y += item_size + item_gap
            shown += 1
        if overflow:
            break

    if overflow and shown < total_items:
        content.append(
            text(
                card_left + padding_x,
                cursor_y,
                f"+{total_items - shown} MORE",
                group_size,
                with_alpha(TEXT_COLOR, DONE_ALPHA),
                bold=True,
                anchor="la",
            )
        )
        cursor_y += group_size + item_gap

    card_bottom = cursor_y - item_gap + padding_y
    card: Node = {
        "kind": "rect",
        "x": card_left,
        "y": top,
        "width": card_width,
        "height": card_bottom - top,
        "fill": CARD_FILL_COLOR,
        "radius": 40 * scale,
        "outline": with_alpha(CARD_BORDER_COLOR, 0.8),
        "outline_width": 1,
    }
    return [card] + content, card_bottom


def _build_task_row(
    task: TodoTask,
    left: float,
    top: float,
    item_size: int,
    box_size: int,
    box_margin: float,
    max_chars: int,
    scale: float,
) -> list[Node]:
    done = task["done"]
    alpha = DONE_ALPHA if done else 1.0
    box_top = top + (item_size - box_size) / 2

    nodes: list[Node] = [
        {
            "kind": "rect",
            "x": left,
            "y": box_top,
            "width": box_size,
            "height": box_size,
            "fill": with_alpha(TODAY_COLOR, alpha) if done else (0, 0, 0, 0),
            "radius": 8 * scale,
            "outline": with_alpha(TODAY_COLOR if done else CHECKBOX_BORDER_COLOR, alpha),
            "outline_width": max(1, round(2 * scale)),
        }
    ]
    if done:
        # Checkmark drawn in a 24x24 box, as the polyline "20 6 9 17 4 12"
        unit = box_size / 24
        nodes.append(
            {
                "kind": "polyline",
                "points": [
                    (left + 20 * unit, box_top + 6 * unit),
                    (left + 9 * unit, box_top + 17 * unit),
                    (left + 4 * unit, box_top + 12 * unit),
                ],
                "stroke": with_alpha(TEXT_COLOR, alpha),
                "stroke_width": max(1, round(3 * unit)),
            }
        )
    nodes.append(
        text(
            left + box_size + box_margin,
            top + item_size / 2,
            truncate_to_width(task["description"], max_chars),
            item_size,
            with_alpha(TEXT_COLOR, alpha),
            anchor="lm",
            strikethrough=done,
        )
    )
    return nodes


def _build_quote(
    quote: Quote,
    width: int,
    top: float,
    bottom: float,
    is_wider: bool,
    has_todos: bool,
    scale: float,
) -> list[Node]:
    quote_size = scaled(24 if has_todos else 32, scale)
    author_size = scaled(20 if has_todos else 28, scale)
    line_height = quote_size * 1.5
    side_padding = (200 if is_wider else 100) * scale

    max_chars = max(8, int((width - 2 * side_padding) / (quote_size * GLYPH_WIDTH_RATIO)))
    lines = textwrap.wrap(f"\"{quote['quote']}\"", width=max_chars)

    author_block = author_size + 15 * scale if quote["author"] else 0
    max_lines = int((bottom - top - author_block) // line_height)
    if max_lines <= 0:
        return []
    if len(lines) > max_lines:
        lines = lines[:max_lines]
        lines[-1] = truncate_to_width(lines[-1] + ELLIPSIS, max_chars)

    nodes: list[Node] = []
    cursor_y = top
    for line in lines:
        nodes.append(
            text(width / 2, cursor_y, line, quote_size, QUOTE_TEXT_COLOR, anchor="ma")
        )
        cursor_y += line_height

    if quote["author"]:
        nodes.append(
            text(
                width / 2,
                cursor_y + 15 * scale,
                f"- {quote['author']}",
                author_size,
                with_alpha(TODAY_COLOR, 0.9),
                bold=True,
                anchor="ma",
            )
        )
    return nodes
