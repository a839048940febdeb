# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Literal, Optional, TypedDict

import pendulum

from trifecta.model.quote import Quote
from trifecta.model.todo import CategorizedTodos, TodoCompletionMap

PeriodType = Literal["year", "month", "day"]


class ViewKind(Enum):
    YEARLY = 0
    MONTHLY = 1
    DAY = 2


class ViewParams(TypedDict):
    date: pendulum.DateTime
    width: int
    height: int


class ViewData(TypedDict):
    completion_map: Optional[TodoCompletionMap]
    todos: Optional[CategorizedTodos]
    quote: Optional[Quote]


class Progress(TypedDict):
    period: PeriodType
    elapsed: int  # days for year/month, seconds for day
    total: int
    remaining: int
    percentage: float
    label: str  # percentage with two decimals, e.g. "45.63"


class GridLayout(TypedDict):
    dots_per_row: int
    rows: int
    leading_cells: int  # empty cells before the first day
    dot_size: int
    gap: int
    grid_width: int
    grid_height: int
    padding_top: float


class RingLayout(TypedDict):
    size: int
    stroke_width: int
    radius: float
    circumference: float
