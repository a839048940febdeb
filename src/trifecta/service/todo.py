# SPDX-License-Identifier: MIT

import re
from typing import Optional

from trifecta.model.todo import (
    CATEGORIES,
    Category,
    CategorizedTodos,
    CategoryProgress,
    ParsedTodos,
    TodoTask,
    TrifectaCompletion,
)

TASK_PREFIX_PATTERN = re.compile(r"^[-*]\s*\[[x ]\]\s*")
TASK_LINE_STARTS = ("- [", "* [")
DONE_MARKER = "[x]"
DEADLINE_MARKER = "deadline"

# Checked in this order, so "## Mind over work" switches to mind
HEADER_PRECEDENCE: tuple[Category, ...] = ("fitness", "mind", "work")


def parse_categorized_content(content: str) -> ParsedTodos:
    """
    Parse a markdown checklist into per-category tasks and completion stats.

    Header lines ("#"-prefixed) naming fitness, mind or work move the
    category cursor, which starts at work. A header mentioning "deadline"
    marks the whole file as a deadline day. Checklist lines ("- [ ]",
    "* [x]") are appended to the current category.

    Args:
        content: Raw markdown text of one daily todo file

    Returns:
        Dict with "completion" (TrifectaCompletion) and "tasks" (CategorizedTodos)
    """
    tasks: CategorizedTodos = {"work": [], "fitness": [], "mind": []}

    current_category: Optional[str] = "work"
    has_deadline = False

    for line in content.splitlines():
        trimmed = line.strip()

        header_category = _header_category(trimmed)
        if header_category is not None:
            current_category = header_category
        elif _header_matches(trimmed, DEADLINE_MARKER):
            has_deadline = True
        elif trimmed.startswith(TASK_LINE_STARTS):
            task = parse_task_line(trimmed)
            if task is not None and current_category in CATEGORIES:
                tasks[current_category].append(task)  # type: ignore[literal-required]

    completion: TrifectaCompletion = {
        "work": calculate_progress(tasks["work"]),
        "fitness": calculate_progress(tasks["fitness"]),
        "mind": calculate_progress(tasks["mind"]),
        "is_deadline": has_deadline,
    }

    return {"completion": completion, "tasks": tasks}


def parse_task_line(line: str) -> Optional[TodoTask]:
    """Parse one checklist line; None when the description is empty."""
    trimmed = line.strip()
    description = TASK_PREFIX_PATTERN.sub("", trimmed, count=1).strip()
    if not description:
        return None
    return {"description": description, "done": DONE_MARKER in trimmed}


def calculate_progress(tasks: list[TodoTask]) -> CategoryProgress:
    total = len(tasks)
    done = len([task for task in tasks if task["done"]])
    return {
        "total": total,
        "done": done,
        "percentage": (done / total) * 100 if total > 0 else 0.0,
    }


def count_tasks(tasks: CategorizedTodos) -> int:
    return sum(len(tasks[category]) for category in CATEGORIES)


def _header_category(line: str) -> Optional[Category]:
    for category in HEADER_PRECEDENCE:
        if _header_matches(line, category):
            return category
    return None


def _header_matches(line: str, keyword: str) -> bool:
    lowered = line.strip().lower()
    return lowered.startswith("#") and keyword in lowered
