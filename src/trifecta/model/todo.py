# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

Category = Literal["work", "fitness", "mind"]

CATEGORIES: tuple[Category, ...] = ("work", "fitness", "mind")


class TodoTask(TypedDict):
    description: str
    done: bool


class CategorizedTodos(TypedDict):
    work: list[TodoTask]
    fitness: list[TodoTask]
    mind: list[TodoTask]


class CategoryProgress(TypedDict):
    total: int
    done: int
    percentage: float  # 0..100


class TrifectaCompletion(TypedDict):
    work: CategoryProgress
    fitness: CategoryProgress
    mind: CategoryProgress
    is_deadline: bool  # Rendered with priority over completion colors


class ParsedTodos(TypedDict):
    completion: TrifectaCompletion
    tasks: CategorizedTodos


# Keyed by 'YYYY-MM-DD', one entry per daily todo file
TodoCompletionMap = dict[str, TrifectaCompletion]
