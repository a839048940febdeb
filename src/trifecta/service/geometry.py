# SPDX-License-Identifier: MIT

import math

import pendulum

from trifecta.model.view import GridLayout, RingLayout

# Dot plus trailing gap, in dot sizes
DOT_PITCH = 1.4
GAP_RATIO = 0.4

YEAR_DOTS_PER_ROW_PORTRAIT = 14
YEAR_DOTS_PER_ROW_LANDSCAPE = 26
YEAR_DOT_CAP_PORTRAIT = 70
YEAR_DOT_CAP_LANDSCAPE = 50

# Top 32% is kept clear for the lock screen clock
CLOCK_SAFE_ZONE = 0.32
MONTH_SAFE_ZONE = 0.25

WEEK_DAYS = 7
MONTH_GRID_WIDTH_RATIO = 0.75
MONTH_GRID_HEIGHT_RATIO = 0.4
MONTH_DOT_CAP = 120

RING_SIZE_CAP = 500
RING_STROKE_RATIO = 0.08

# Reference width the fixed font sizes were designed for (iPhone portrait)
REFERENCE_WIDTH = 1179
MIN_TEXT_SCALE = 0.25
MAX_TEXT_SCALE = 4.0


def is_portrait(width: int, height: int) -> bool:
    return height > width


def get_gap(dot_size: int) -> int:
    return math.floor(dot_size * GAP_RATIO)


def get_grid_extent(count: int, dot_size: int, gap: int) -> int:
    """Length of ``count`` dots separated by ``gap`` (no trailing gap)."""
    if count <= 0:
        return 0
    return count * dot_size + (count - 1) * gap


def get_year_grid_layout(width: int, height: int, day_count: int) -> GridLayout:
    """
    Size the year dot grid so it fits the screen on both axes.

    The dot size is the smallest of a height bound, a width bound and a
    hard cap, so the grid never overflows either axis.
    """
    portrait = is_portrait(width, height)

    dots_per_row = (
        YEAR_DOTS_PER_ROW_PORTRAIT if portrait else YEAR_DOTS_PER_ROW_LANDSCAPE
    )
    rows = math.ceil(day_count / dots_per_row)

    grid_max_height = height * (0.58 if portrait else 0.55)
    grid_max_width = width * (0.95 if portrait else 0.85)

    dot_size_from_height = math.floor(grid_max_height / (rows * DOT_PITCH))
    dot_size_from_width = math.floor(grid_max_width / (dots_per_row * DOT_PITCH))
    dot_cap = YEAR_DOT_CAP_PORTRAIT if portrait else YEAR_DOT_CAP_LANDSCAPE

    dot_size = max(1, min(dot_size_from_height, dot_size_from_width, dot_cap))
    gap = get_gap(dot_size)

    return {
        "dots_per_row": dots_per_row,
        "rows": rows,
        "leading_cells": 0,
        "dot_size": dot_size,
        "gap": gap,
        "grid_width": get_grid_extent(dots_per_row, dot_size, gap),
        "grid_height": get_grid_extent(rows, dot_size, gap),
        "padding_top": height * CLOCK_SAFE_ZONE,
    }


def first_weekday_padding(first_of_month: pendulum.Date) -> int:
    """Empty cells before the 1st in a Monday-first week grid."""
    sunday_based_weekday = first_of_month.isoweekday() % 7
    return (sunday_based_weekday + 6) % 7


def get_month_grid_layout(
    width: int,
    height: int,
    first_of_month: pendulum.Date,
    day_count: int,
) -> GridLayout:
    leading_cells = first_weekday_padding(first_of_month)
    rows = math.ceil((leading_cells + day_count) / WEEK_DAYS)

    dot_size_from_width = math.floor(
        (width * MONTH_GRID_WIDTH_RATIO) / (WEEK_DAYS + (WEEK_DAYS - 1) * GAP_RATIO)
    )
    dot_size_from_height = math.floor(
        (height * MONTH_GRID_HEIGHT_RATIO) / (rows * DOT_PITCH)
    )
    dot_size = max(1, min(dot_size_from_width, dot_size_from_height, MONTH_DOT_CAP))
    gap = get_gap(dot_size)

    return {
        "dots_per_row": WEEK_DAYS,
        "rows": rows,
        "leading_cells": leading_cells,
        "dot_size": dot_size,
        "gap": gap,
        "grid_width": get_grid_extent(WEEK_DAYS, dot_size, gap),
        "grid_height": get_grid_extent(rows, dot_size, gap),
        "padding_top": height * MONTH_SAFE_ZONE,
    }


def get_cell_origin(layout: GridLayout, index: int) -> tuple[int, int]:
    """Top-left offset of cell ``index`` (leading cells included) inside the grid."""
    column = index % layout["dots_per_row"]
    row = index // layout["dots_per_row"]
    pitch = layout["dot_size"] + layout["gap"]
    return (column * pitch, row * pitch)


def get_ring_layout(width: int, height: int, has_todos: bool) -> RingLayout:
    # Shrink the ring a little to leave room for the checklist
    size_multiplier = 0.5 if has_todos else 0.6
    size = min(
        math.floor(width * size_multiplier), math.floor(height * 0.3), RING_SIZE_CAP
    )
    size = max(size, 1)
    stroke_width = max(1, math.floor(size * RING_STROKE_RATIO))
    radius = (size - stroke_width) / 2
    return {
        "size": size,
        "stroke_width": stroke_width,
        "radius": radius,
        "circumference": 2 * math.pi * radius,
    }


def get_dash_offset(circumference: float, percentage: float) -> float:
    p = max(0.0, min(100.0, percentage))
    return circumference - (p / 100) * circumference


def get_text_scale(width: int, height: int) -> float:
    scale = min(width, height) / REFERENCE_WIDTH
    return max(MIN_TEXT_SCALE, min(MAX_TEXT_SCALE, scale))


def scaled(value: float, scale: float) -> int:
    return max(1, round(value * scale))
