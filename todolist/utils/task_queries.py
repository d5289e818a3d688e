"""
Pure query, sort and statistics helpers over task collections

Every function returns a new list or aggregate and never mutates its input.
"""

import locale
import math
from collections import Counter
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Sequence, Union
from todolist.config.constants import (
    DIFFICULTY_RANK,
    DEFAULT_DIFFICULTY_RANK,
    HIGH_PRIORITY_THRESHOLD,
)
from todolist.models.task import Task
from todolist.utils.date_utils import parse_iso_datetime

TaskPredicate = Callable[[Task], bool]
TaskSorter = Callable[[Sequence[Task]], List[Task]]


def _enum_value(value) -> str:
    return getattr(value, "value", value)


# ---- predicates ----

def is_not_deleted(task: Task) -> bool:
    return not task.deleted


def is_high_priority(task: Task) -> bool:
    """Priority >= 4 and not deleted"""
    return task.priority >= HIGH_PRIORITY_THRESHOLD and not task.deleted


def is_overdue(now: Union[str, datetime]) -> TaskPredicate:
    """
    Build predicate: task has a due date strictly earlier than `now`

    Tasks without a due date (or with an unparseable one) are never overdue.
    """
    now_dt = parse_iso_datetime(now)
    if now_dt is None:
        raise ValueError(f"Invalid reference time: {now!r}")

    def predicate(task: Task) -> bool:
        due = parse_iso_datetime(task.due_date)
        if due is None:
            return False
        return due < now_dt

    return predicate


def has_tag(tag: str) -> TaskPredicate:
    def predicate(task: Task) -> bool:
        return tag in task.tags
    return predicate


def related_to(task_id: str) -> TaskPredicate:
    def predicate(task: Task) -> bool:
        return task_id in task.related_ids
    return predicate


# ---- sorters ----

def _title_key(task: Task):
    return (locale.strxfrm(task.title.casefold()), task.title)


def _timestamp(value) -> float:
    dt = parse_iso_datetime(value)
    return dt.timestamp() if dt is not None else math.inf


def difficulty_rank(difficulty) -> int:
    """low=1, medium=2, high=3; anything else ranks as medium"""
    return DIFFICULTY_RANK.get(_enum_value(difficulty), DEFAULT_DIFFICULTY_RANK)


def sort_by_title(tasks: Sequence[Task]) -> List[Task]:
    return sorted(tasks, key=_title_key)


def sort_by_creation(tasks: Sequence[Task]) -> List[Task]:
    return sorted(tasks, key=lambda t: _timestamp(t.created_at))


def sort_by_due_date(tasks: Sequence[Task]) -> List[Task]:
    # no due date sorts last
    return sorted(tasks, key=lambda t: _timestamp(t.due_date))


def sort_by_difficulty(tasks: Sequence[Task]) -> List[Task]:
    return sorted(tasks, key=lambda t: difficulty_rank(t.difficulty))


SORTERS: Dict[str, TaskSorter] = {
    "title": sort_by_title,
    "createdAt": sort_by_creation,
    "created_at": sort_by_creation,
    "dueDate": sort_by_due_date,
    "due_date": sort_by_due_date,
    "difficulty": sort_by_difficulty,
}


# ---- statistics ----

def stats_total(tasks: Iterable[Task]) -> int:
    return sum(1 for t in tasks if is_not_deleted(t))


def stats_by_status(tasks: Iterable[Task]) -> Dict[str, int]:
    return dict(Counter(_enum_value(t.status) for t in tasks if is_not_deleted(t)))


def stats_by_difficulty(tasks: Iterable[Task]) -> Dict[str, int]:
    return dict(Counter(_enum_value(t.difficulty) for t in tasks if is_not_deleted(t)))
