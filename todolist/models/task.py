"""
Task model
"""

import uuid
from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from todolist.config.constants import TASK_DEFAULT_PRIORITY
from todolist.utils.date_utils import get_current_iso


class TaskStatus(str, Enum):
    """Task lifecycle status"""
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    CANCELLED = "cancelled"

    @classmethod
    def from_raw(cls, raw: Any) -> "TaskStatus":
        """Map a stored value to a status, unknown values become TODO"""
        if not raw:
            return cls.TODO
        try:
            return cls(raw)
        except ValueError:
            return cls.TODO


class TaskDifficulty(str, Enum):
    """Task difficulty"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_raw(cls, raw: Any) -> "TaskDifficulty":
        """Map a stored value to a difficulty, unknown values become MEDIUM"""
        if not raw:
            return cls.MEDIUM
        try:
            return cls(raw)
        except ValueError:
            return cls.MEDIUM


def _new_task_id() -> str:
    return str(uuid.uuid4())


# keys (python name or JSON alias) whose null value falls back to the default
NULL_AS_DEFAULT = frozenset({
    "id", "createdAt", "created_at", "difficulty", "priority", "status",
    "tags", "relatedIds", "related_ids", "deleted",
})


class Task(BaseModel):
    """Task model"""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: str = Field(default_factory=_new_task_id)
    title: str
    description: Optional[str] = None
    created_at: str = Field(default_factory=get_current_iso, alias="createdAt")
    due_date: Optional[str] = Field(None, alias="dueDate")
    difficulty: TaskDifficulty = TaskDifficulty.MEDIUM
    priority: int = TASK_DEFAULT_PRIORITY  # 1..5 (5 = highest), range not enforced
    status: TaskStatus = TaskStatus.TODO
    tags: List[str] = Field(default_factory=list)
    related_ids: List[str] = Field(default_factory=list, alias="relatedIds")
    deleted: bool = False

    @field_validator("title")
    @classmethod
    def _title_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("Task must have a non-empty title")
        return value

    @field_validator("id")
    @classmethod
    def _id_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("Task id must not be empty")
        return value

    @model_validator(mode="before")
    @classmethod
    def _null_means_default(cls, data: Any) -> Any:
        # null and absent are equivalent for fields that have a default
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if not (v is None and k in NULL_AS_DEFAULT)}
        return data

    def complete(self) -> None:
        """Mark the task as done"""
        self.status = TaskStatus.DONE

    def soft_delete(self) -> None:
        """Mark the task as deleted while keeping it in storage"""
        self.deleted = True

    def restore(self) -> None:
        """Undo a soft delete"""
        self.deleted = False

    def to_record(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys"""
        return self.model_dump(mode="json", by_alias=True)


class TaskUpdate(BaseModel):
    """Partial changes applied to an existing task (id and createdAt are immutable)"""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[str] = Field(None, alias="dueDate")
    difficulty: Optional[TaskDifficulty] = None
    priority: Optional[int] = None
    status: Optional[TaskStatus] = None
    tags: Optional[List[str]] = None
    related_ids: Optional[List[str]] = Field(None, alias="relatedIds")
    deleted: Optional[bool] = None

    def changed_fields(self) -> Dict[str, Any]:
        """
        Only the fields explicitly present in the changes

        A null for a field that has a default keeps the current value.
        """
        return {
            k: v for k, v in self.model_dump(exclude_unset=True).items()
            if not (v is None and k in NULL_AS_DEFAULT)
        }
