# SPDX-License-Identifier: MIT

from trifecta.service.todo import (
    calculate_progress,
    count_tasks,
    parse_categorized_content,
    parse_task_line,
)

EXAMPLE = """## Work
- [x] A
- [ ] B
## Fitness
- [x] C
"""


def test_parses_categories_and_completion() -> None:
    parsed = parse_categorized_content(EXAMPLE)
    completion = parsed["completion"]

    assert (completion["work"]["done"], completion["work"]["total"]) == (1, 2)
    assert completion["work"]["percentage"] == 50.0
    assert (completion["fitness"]["done"], completion["fitness"]["total"]) == (1, 1)
    assert completion["fitness"]["percentage"] == 100.0
    assert (completion["mind"]["done"], completion["mind"]["total"]) == (0, 0)
    assert completion["mind"]["percentage"] == 0.0
    assert completion["is_deadline"] is False

    assert parsed["tasks"]["work"] == [
        {"description": "A", "done": True},
        {"description": "B", "done": False},
    ]
    assert parsed["tasks"]["fitness"] == [{"description": "C", "done": True}]


def test_tasks_before_any_header_go_to_work() -> None:
    parsed = parse_categorized_content("- [ ] first\n* [x] second\n")

    assert [t["description"] for t in parsed["tasks"]["work"]] == ["first", "second"]
    assert parsed["tasks"]["work"][1]["done"] is True


def test_header_precedence_prefers_fitness_then_mind() -> None:
    parsed = parse_categorized_content(
        "# Mind over work\n- [ ] read\n# Fitness for the mind\n- [ ] run\n"
    )

    assert parsed["tasks"]["mind"] == [{"description": "read", "done": False}]
    assert parsed["tasks"]["fitness"] == [{"description": "run", "done": False}]
    assert parsed["tasks"]["work"] == []


def test_headers_are_case_insensitive() -> None:
    parsed = parse_categorized_content("### MIND\n- [x] meditate\n")

    assert parsed["completion"]["mind"]["done"] == 1


def test_deadline_header_flags_the_file() -> None:
    parsed = parse_categorized_content("# Deadline\n## Work\n- [ ] ship\n")

    assert parsed["completion"]["is_deadline"] is True
    assert parsed["completion"]["work"]["total"] == 1


def test_category_header_mentioning_deadline_is_only_a_category() -> None:
    parsed = parse_categorized_content("## Work deadline\n- [ ] ship\n")

    assert parsed["completion"]["is_deadline"] is False
    assert parsed["completion"]["work"]["total"] == 1


def test_deadline_word_outside_header_is_ignored() -> None:
    parsed = parse_categorized_content("- [ ] meet the deadline\n")

    assert parsed["completion"]["is_deadline"] is False
    assert parsed["tasks"]["work"][0]["description"] == "meet the deadline"


def test_empty_descriptions_and_prose_are_discarded() -> None:
    parsed = parse_categorized_content("- [ ]   \n- [x]\nsome notes\n- plain bullet\n")

    assert count_tasks(parsed["tasks"]) == 0


def test_empty_content() -> None:
    parsed = parse_categorized_content("")

    assert count_tasks(parsed["tasks"]) == 0
    for category in ("work", "fitness", "mind"):
        assert parsed["completion"][category] == {
            "total": 0,
            "done": 0,
            "percentage": 0.0,
        }


def test_parsing_is_idempotent() -> None:
    assert parse_categorized_content(EXAMPLE) == parse_categorized_content(EXAMPLE)


def test_parse_task_line() -> None:
    assert parse_task_line("  - [x] Call mom  ") == {"description": "Call mom", "done": True}
    assert parse_task_line("*[ ] stretch") == {"description": "stretch", "done": False}
    assert parse_task_line("- [ ]") is None


def test_calculate_progress_bounds() -> None:
    tasks = [
        {"description": "a", "done": True},
        {"description": "b", "done": False},
        {"description": "c", "done": False},
    ]
    progress = calculate_progress(tasks)  # type: ignore[arg-type]

    assert progress["done"] <= progress["total"]
    assert progress["percentage"] == 100 / 3
    assert calculate_progress([]) == {"total": 0, "done": 0, "percentage": 0.0}
