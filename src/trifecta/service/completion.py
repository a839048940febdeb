# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from trifecta.model.todo import ParsedTodos, TodoCompletionMap
from trifecta.repository.todo import TodoRepository
from trifecta.service.todo import parse_categorized_content

logger = logging.getLogger(__name__)


def get_todo_completion_map(repository: TodoRepository) -> TodoCompletionMap:
    """
    Build the date -> completion mapping across all stored daily todo files.

    A file that cannot be read is skipped, so its date is absent from the
    map. An inaccessible todo directory yields an empty map.
    """
    completion_map: TodoCompletionMap = {}

    try:
        date_keys = repository.list_date_keys()
    except OSError as e:
        logger.warning("Cannot read todos directory %s: %s", repository.todos_dir, e)
        return completion_map

    for date_key in date_keys:
        parsed = get_todos_for_date(repository, date_key)
        if parsed is not None:
            completion_map[date_key] = parsed["completion"]

    return completion_map


def get_todos_for_date(
    repository: TodoRepository, date_key: str
) -> Optional[ParsedTodos]:
    """Parse one day's todo file; None when it is missing or unreadable."""
    try:
        content = repository.read_text(date_key)
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Error reading todo file for %s: %s", date_key, e)
        return None
    return parse_categorized_content(content)
