"""
Message formatting utilities
"""

from typing import List, Optional
from datetime import datetime
from todolist.models.task import Task, TaskStatus
from todolist.models.response import TaskStatistics
from todolist.utils.date_utils import parse_iso_datetime


def format_date_for_user(date: datetime) -> str:
    """
    Format date for user display

    Args:
        date: Datetime object

    Returns:
        Formatted date string (DD.MM.YYYY)
    """
    return date.strftime('%d.%m.%Y')


def format_task_line(task: Task) -> str:
    """
    Format a single task as one line

    Args:
        task: Task to format

    Returns:
        Line like "[x] Title (due 01.02.2025, p5, high) #tag"
    """
    mark = "x" if task.status == TaskStatus.DONE else " "
    details: List[str] = []

    due = parse_iso_datetime(task.due_date)
    if due:
        details.append(f"due {format_date_for_user(due)}")
    elif task.due_date:
        details.append(f"due {task.due_date}")

    details.append(f"p{task.priority}")
    details.append(task.difficulty.value)

    line = f"[{mark}] {task.title} ({', '.join(details)})"
    if task.tags:
        line += " " + " ".join(f"#{tag}" for tag in task.tags)
    if task.deleted:
        line += " [deleted]"
    return line


def format_task_list(tasks: List[Task], header: Optional[str] = None) -> str:
    """Format tasks one per line, with an optional header"""
    lines: List[str] = [header] if header else []
    if not tasks:
        lines.append("No tasks")
    else:
        lines.extend(format_task_line(t) for t in tasks)
    return "\n".join(lines)


def format_statistics(stats: TaskStatistics) -> str:
    """
    Format statistics message

    Args:
        stats: Aggregated task statistics

    Returns:
        Formatted message
    """
    message = f"Total tasks: {stats.total}"

    if stats.by_status:
        parts = ", ".join(f"{k}={v}" for k, v in sorted(stats.by_status.items()))
        message += f"\nBy status: {parts}"

    if stats.by_difficulty:
        parts = ", ".join(f"{k}={v}" for k, v in sorted(stats.by_difficulty.items()))
        message += f"\nBy difficulty: {parts}"

    return message
