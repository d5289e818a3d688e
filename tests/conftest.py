"""
Pytest configuration and fixtures
"""

import pytest
from datetime import timedelta
from todolist.services.task_manager import TaskManager
from todolist.services.task_repository import TaskRepository
from todolist.utils.date_utils import get_current_datetime, to_iso


@pytest.fixture
def tasks_file(tmp_path):
    """Path of a tasks file inside a nested, not yet existing directory"""
    return tmp_path / "data" / "tareas.json"


@pytest.fixture
def task_repository(tasks_file):
    """Task repository with temporary file"""
    return TaskRepository(tasks_file)


@pytest.fixture
def task_manager(task_repository):
    """Task manager backed by a temporary file"""
    return TaskManager(task_repository)


@pytest.fixture
def three_tasks():
    """Payloads with priorities [5, 2, 4] and due dates [+1d, none, -1d]"""
    now = get_current_datetime()
    return [
        {"title": "Future", "priority": 5, "dueDate": to_iso(now + timedelta(days=1))},
        {"title": "Undated", "priority": 2},
        {"title": "Late", "priority": 4, "dueDate": to_iso(now - timedelta(days=1))},
    ]
