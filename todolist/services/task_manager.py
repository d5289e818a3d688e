"""
Task management service
"""

from datetime import datetime
from typing import Optional, List, Dict, Any, Union
from pydantic import ValidationError
from todolist.models.task import Task, TaskUpdate
from todolist.models.response import TaskStatistics
from todolist.services.task_repository import TaskRepository
from todolist.utils.date_utils import get_current_datetime
from todolist.utils.error_handler import TaskValidationError
from todolist.utils.logger import get_logger
from todolist.utils.task_queries import (
    SORTERS,
    has_tag,
    is_high_priority,
    is_not_deleted,
    is_overdue,
    related_to,
    stats_by_difficulty,
    stats_by_status,
    stats_total,
)


class TaskManager:
    """
    Service for managing tasks

    Keeps the whole collection in memory after the first access and writes it
    back to the repository after every mutation (write-through). If a write
    fails the error propagates and the in-memory copy keeps the change, so the
    cache and the file may diverge until the next successful write or reload().
    """

    def __init__(self, repository: Optional[TaskRepository] = None):
        """
        Initialize task manager

        Args:
            repository: Task repository (optional, defaults to settings path)
        """
        self.repository = repository or TaskRepository()
        self._cache: Optional[List[Task]] = None
        self.logger = get_logger("manager")

    @property
    def is_loaded(self) -> bool:
        return self._cache is not None

    async def load_if_needed(self) -> List[Task]:
        """Load tasks from the repository on first access only"""
        if self._cache is None:
            self._cache = await self.repository.read_all()
            self.logger.debug(f"Cache loaded with {len(self._cache)} tasks")
        return self._cache

    async def reload(self) -> List[Task]:
        """Discard the cache and read the repository again"""
        self._cache = await self.repository.read_all()
        self.logger.debug(f"Cache reloaded with {len(self._cache)} tasks")
        return self._cache

    async def _persist(self) -> None:
        await self.repository.write_all(self._cache)

    def _index_of(self, task_id: str) -> int:
        for idx, task in enumerate(self._cache):
            if task.id == task_id:
                return idx
        return -1

    # ---- mutations ----

    async def add(self, payload: Union[Dict[str, Any], Task]) -> Task:
        """
        Create a task and persist the collection

        Args:
            payload: Task fields (python names or camelCase); `title` is required

        Returns:
            Created task

        Raises:
            TaskValidationError: missing/empty title, bad field values or duplicate id
        """
        cache = await self.load_if_needed()

        if isinstance(payload, Task):
            payload = payload.model_dump()
        try:
            task = Task.model_validate(payload)
        except ValidationError as e:
            raise TaskValidationError(f"Cannot create task: {e}", e.errors()) from e

        if self._index_of(task.id) != -1:
            raise TaskValidationError(f"Task id {task.id} already exists")

        cache.append(task)
        await self._persist()
        self.logger.info(f"Task created: '{task.title}' ({task.id})")
        return task

    async def update(self, task_id: str, changes: Dict[str, Any]) -> Optional[Task]:
        """
        Merge changes over an existing task

        `id` and `createdAt` in changes are ignored.

        Returns:
            Updated task, or None if no task has this id
        """
        cache = await self.load_if_needed()
        idx = self._index_of(task_id)
        if idx == -1:
            self.logger.debug(f"Update skipped, task {task_id} not found")
            return None

        current = cache[idx]
        try:
            fields = TaskUpdate.model_validate(changes).changed_fields()
            updated = Task.model_validate({**current.model_dump(), **fields, "id": current.id})
        except ValidationError as e:
            raise TaskValidationError(f"Cannot update task {task_id}: {e}", e.errors()) from e

        cache[idx] = updated
        await self._persist()
        self.logger.info(f"Task updated: {task_id} fields={sorted(fields)}")
        return updated

    async def complete(self, task_id: str) -> Optional[Task]:
        """Mark task as done; None if not found"""
        task = await self.find_by_id(task_id)
        if task is None:
            return None
        task.complete()
        await self._persist()
        self.logger.info(f"Task completed: {task_id}")
        return task

    async def soft_delete(self, task_id: str) -> bool:
        """Mark task as deleted; False if not found"""
        task = await self.find_by_id(task_id)
        if task is None:
            return False
        task.soft_delete()
        await self._persist()
        self.logger.info(f"Task soft-deleted: {task_id}")
        return True

    async def restore(self, task_id: str) -> bool:
        """Undo a soft delete; False if not found"""
        task = await self.find_by_id(task_id)
        if task is None:
            return False
        task.restore()
        await self._persist()
        self.logger.info(f"Task restored: {task_id}")
        return True

    async def hard_delete(self, task_id: str) -> bool:
        """
        Remove task from the collection for good

        Returns:
            True if the collection shrank
        """
        cache = await self.load_if_needed()
        prev_len = len(cache)
        self._cache = [t for t in cache if t.id != task_id]
        await self._persist()
        removed = len(self._cache) < prev_len
        if removed:
            self.logger.info(f"Task removed: {task_id}")
        return removed

    # ---- queries ----

    async def find_by_id(self, task_id: str) -> Optional[Task]:
        cache = await self.load_if_needed()
        for task in cache:
            if task.id == task_id:
                return task
        return None

    async def list(
        self,
        include_deleted: bool = False,
        sort_by: Optional[str] = None,
    ) -> List[Task]:
        """
        List tasks from the cache

        Args:
            include_deleted: Keep soft-deleted tasks
            sort_by: "title", "createdAt", "dueDate" or "difficulty"

        Returns:
            New list; cache order unless sort_by is given
        """
        cache = await self.load_if_needed()
        result = [t for t in cache if include_deleted or is_not_deleted(t)]

        if sort_by:
            sorter = SORTERS.get(sort_by)
            if sorter is None:
                raise ValueError(f"Unknown sort key: {sort_by}")
            result = sorter(result)

        return result

    async def statistics(self) -> TaskStatistics:
        cache = await self.load_if_needed()
        return TaskStatistics(
            total=stats_total(cache),
            by_status=stats_by_status(cache),
            by_difficulty=stats_by_difficulty(cache),
        )

    async def high_priority(self) -> List[Task]:
        cache = await self.load_if_needed()
        return [t for t in cache if is_high_priority(t)]

    async def overdue(self, now: Union[str, datetime, None] = None) -> List[Task]:
        """Non-deleted tasks whose due date is before `now` (default: current time)"""
        cache = await self.load_if_needed()
        predicate = is_overdue(now if now is not None else get_current_datetime())
        return [t for t in cache if predicate(t) and is_not_deleted(t)]

    async def related_tasks(self, task_id: str) -> List[Task]:
        """Tasks whose relatedIds point at task_id (deleted ones included)"""
        cache = await self.load_if_needed()
        predicate = related_to(task_id)
        return [t for t in cache if predicate(t)]

    async def with_tag(self, tag: str) -> List[Task]:
        cache = await self.load_if_needed()
        predicate = has_tag(tag)
        return [t for t in cache if predicate(t) and is_not_deleted(t)]
