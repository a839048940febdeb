# SPDX-License-Identifier: MIT

import math

import pendulum
import pytest

from trifecta.service.geometry import (
    first_weekday_padding,
    get_cell_origin,
    get_dash_offset,
    get_month_grid_layout,
    get_ring_layout,
    get_text_scale,
    get_year_grid_layout,
    is_portrait,
)


def test_landscape_year_grid() -> None:
    layout = get_year_grid_layout(800, 600, 366)

    assert layout["dots_per_row"] == 26
    assert layout["rows"] == 15
    assert layout["dot_size"] == 15
    assert layout["gap"] == 6
    assert layout["padding_top"] == 600 * 0.32


def test_portrait_year_grid() -> None:
    layout = get_year_grid_layout(600, 1200, 366)

    assert layout["dots_per_row"] == 14
    assert layout["rows"] == 27
    assert layout["dot_size"] == 18
    assert layout["gap"] == 7
    assert layout["grid_width"] == 14 * 18 + 13 * 7


def test_square_is_landscape() -> None:
    assert is_portrait(500, 500) is False
    assert get_year_grid_layout(500, 500, 365)["dots_per_row"] == 26


@pytest.mark.parametrize(
    "width,height", [(1179, 2556), (2556, 1179), (800, 600), (320, 240), (4000, 300)]
)
def test_year_grid_fits_the_screen(width: int, height: int) -> None:
    layout = get_year_grid_layout(width, height, 366)
    cap = 70 if is_portrait(width, height) else 50

    assert layout["dot_size"] <= cap
    assert layout["grid_width"] <= width
    assert layout["grid_height"] <= height * 0.58


def test_year_grid_dot_cap() -> None:
    assert get_year_grid_layout(4000, 8000, 365)["dot_size"] == 70


def test_first_weekday_padding_is_monday_first() -> None:
    assert first_weekday_padding(pendulum.date(2024, 4, 1)) == 0  # Monday
    assert first_weekday_padding(pendulum.date(2024, 6, 1)) == 5  # Saturday
    assert first_weekday_padding(pendulum.date(2024, 9, 1)) == 6  # Sunday


def test_month_grid_layout() -> None:
    layout = get_month_grid_layout(1179, 2556, pendulum.date(2024, 6, 1), 30)

    assert layout["dots_per_row"] == 7
    assert layout["leading_cells"] == 5
    assert layout["rows"] == 5
    assert layout["dot_size"] == math.floor(1179 * 0.75 / (7 + 6 * 0.4))
    assert layout["padding_top"] == 2556 * 0.25


def test_month_grid_is_bounded_by_height() -> None:
    layout = get_month_grid_layout(2000, 400, pendulum.date(2024, 9, 1), 30)

    assert layout["rows"] == 6
    assert layout["dot_size"] == math.floor(400 * 0.4 / (6 * 1.4))


def test_cell_origin() -> None:
    layout = get_month_grid_layout(1179, 2556, pendulum.date(2024, 6, 1), 30)
    pitch = layout["dot_size"] + layout["gap"]

    assert get_cell_origin(layout, 0) == (0, 0)
    assert get_cell_origin(layout, 8) == (pitch, pitch)


def test_ring_layout() -> None:
    ring = get_ring_layout(1179, 2556, has_todos=False)

    assert ring["size"] == 500
    assert ring["stroke_width"] == 40
    assert ring["radius"] == 230
    assert ring["circumference"] == pytest.approx(2 * math.pi * 230)


def test_ring_shrinks_for_todos() -> None:
    without = get_ring_layout(600, 1200, has_todos=False)
    with_todos = get_ring_layout(600, 1200, has_todos=True)

    assert without["size"] > with_todos["size"]
    assert with_todos["size"] == 300
    assert with_todos["stroke_width"] == 24


def test_dash_offset() -> None:
    assert get_dash_offset(100.0, 0) == 100.0
    assert get_dash_offset(100.0, 25) == 75.0
    assert get_dash_offset(100.0, 100) == 0.0
    assert get_dash_offset(100.0, 150) == 0.0


def test_text_scale() -> None:
    assert get_text_scale(1179, 2556) == 1.0
    assert get_text_scale(100, 100) == 0.25
    assert get_text_scale(10000, 10000) == 4.0


def test_layouts_are_pure() -> None:
    first = pendulum.date(2024, 2, 1)

    assert get_year_grid_layout(800, 600, 366) == get_year_grid_layout(800, 600, 366)
    assert get_month_grid_layout(800, 600, first, 29) == get_month_grid_layout(
        800, 600, first, 29
    )
    assert get_ring_layout(800, 600, True) == get_ring_layout(800, 600, True)
