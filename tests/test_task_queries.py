"""
Tests for pure task query helpers
"""

import pytest
from datetime import datetime, timezone
from todolist.models.task import Task, TaskDifficulty, TaskStatus
from todolist.utils.task_queries import (
    SORTERS,
    difficulty_rank,
    has_tag,
    is_high_priority,
    is_not_deleted,
    is_overdue,
    related_to,
    sort_by_creation,
    sort_by_difficulty,
    sort_by_due_date,
    sort_by_title,
    stats_by_difficulty,
    stats_by_status,
    stats_total,
)


def test_is_overdue_with_past_due_date():
    """Test due date before now"""
    task = Task(title="x", due_date="2025-01-01T00:00:00Z")
    assert is_overdue("2025-01-02T00:00:00Z")(task) is True


def test_is_overdue_is_strict():
    """Test that a due date equal to now is not overdue"""
    task = Task(title="x", due_date="2025-01-01T00:00:00Z")
    assert is_overdue("2025-01-01T00:00:00.000Z")(task) is False


def test_is_overdue_without_due_date():
    """Test that tasks without due date are never overdue"""
    task = Task(title="x")
    assert is_overdue("2999-01-01T00:00:00Z")(task) is False
    assert is_overdue(datetime(1970, 1, 1, tzinfo=timezone.utc))(task) is False


def test_is_overdue_accepts_datetime_and_offsets():
    """Test mixed reference types and time zones"""
    task = Task(title="x", due_date="2025-01-01T02:00:00+03:00")  # 23:00 UTC the day before
    assert is_overdue(datetime(2025, 1, 1, 0, 0))(task) is True


def test_is_overdue_rejects_bad_reference():
    with pytest.raises(ValueError):
        is_overdue("not a date")


def test_is_high_priority():
    """Test priority threshold and deleted exclusion"""
    assert is_high_priority(Task(title="x", priority=4))
    assert is_high_priority(Task(title="x", priority=5))
    assert not is_high_priority(Task(title="x", priority=3))
    assert not is_high_priority(Task(title="x", priority=5, deleted=True))


def test_tag_and_relation_predicates():
    task = Task(title="x", tags=["home"], related_ids=["a"])
    assert has_tag("home")(task)
    assert not has_tag("work")(task)
    assert related_to("a")(task)
    assert not related_to("b")(task)
    assert is_not_deleted(task)


def test_sort_by_due_date_puts_undated_last():
    """Test ascending due date with missing dates last"""
    undated = Task(title="none")
    late = Task(title="late", due_date="2025-03-01T00:00:00Z")
    early = Task(title="early", due_date="2025-01-01T00:00:00Z")
    tasks = [undated, late, early]

    result = sort_by_due_date(tasks)

    assert [t.title for t in result] == ["early", "late", "none"]
    # input list unchanged
    assert [t.title for t in tasks] == ["none", "late", "early"]


def test_sort_by_difficulty_with_unknown_value():
    """Test low < medium < high; unknown ranks as medium"""
    high = Task(title="high", difficulty=TaskDifficulty.HIGH)
    low = Task(title="low", difficulty=TaskDifficulty.LOW)
    unknown = Task.model_construct(title="unknown", difficulty="extreme", deleted=False)
    medium = Task(title="medium")

    result = sort_by_difficulty([high, unknown, low, medium])

    assert [t.title for t in result] == ["low", "unknown", "medium", "high"]


def test_difficulty_rank():
    assert difficulty_rank(TaskDifficulty.LOW) == 1
    assert difficulty_rank("medium") == 2
    assert difficulty_rank(TaskDifficulty.HIGH) == 3
    assert difficulty_rank("extreme") == 2


def test_sort_by_title_ignores_case():
    tasks = [Task(title="charlie"), Task(title="Bravo"), Task(title="alpha")]
    assert [t.title for t in sort_by_title(tasks)] == ["alpha", "Bravo", "charlie"]


def test_sort_by_creation():
    newer = Task(title="newer", created_at="2025-05-01T00:00:00.000Z")
    older = Task(title="older", created_at="2024-05-01T00:00:00.000Z")
    assert [t.title for t in sort_by_creation([newer, older])] == ["older", "newer"]


def test_sorters_mapping():
    assert SORTERS["dueDate"] is sort_by_due_date
    assert SORTERS["due_date"] is sort_by_due_date
    assert SORTERS["createdAt"] is sort_by_creation
    assert SORTERS["title"] is sort_by_title
    assert SORTERS["difficulty"] is sort_by_difficulty


def test_statistics_skip_deleted_tasks():
    """Test aggregations over non-deleted tasks only"""
    tasks = [
        Task(title="a"),
        Task(title="b", status=TaskStatus.DONE, difficulty=TaskDifficulty.HIGH),
        Task(title="c", status=TaskStatus.DONE),
        Task(title="d", status=TaskStatus.CANCELLED, deleted=True),
    ]

    assert stats_total(tasks) == 3
    assert stats_by_status(tasks) == {"todo": 1, "done": 2}
    assert stats_by_difficulty(tasks) == {"medium": 2, "high": 1}


def test_statistics_on_empty_collection():
    assert stats_total([]) == 0
    assert stats_by_status([]) == {}
    assert stats_by_difficulty([]) == {}
