"""
Task repository for storing the task collection in a JSON file
"""

import asyncio
import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union
from pydantic import ValidationError
from todolist.config.constants import JSON_INDENT
from todolist.config.settings import settings
from todolist.models.task import Task, TaskDifficulty, TaskStatus
from todolist.utils.error_handler import RepositoryError
from todolist.utils.logger import get_logger

# mode a plain open(..., "w") would give a new file
_UMASK = os.umask(0)
os.umask(_UMASK)
NEW_FILE_MODE = 0o666 & ~_UMASK


class TaskRepository:
    """Reads and writes the whole task collection as one JSON array"""

    def __init__(self, filename: Optional[Union[str, Path]] = None):
        """
        Initialize task repository

        Args:
            filename: Path to tasks file (optional, uses settings or "tareas.json")
        """
        if filename is None:
            filename = settings.TASKS_FILE
        # relative paths resolve against the working directory
        self.file_path = Path(filename).expanduser().resolve()
        self.logger = get_logger("repository")

    async def read_all(self) -> List[Task]:
        """
        Read all tasks from the file

        Returns:
            Tasks in file order; empty list if the file does not exist

        Raises:
            RepositoryError: file unreadable, not JSON, or not a JSON array
        """
        return await asyncio.to_thread(self._read_sync)

    async def write_all(self, tasks: Sequence[Task]) -> None:
        """
        Replace the file contents with the given tasks, keeping their order

        Args:
            tasks: Tasks to persist

        Raises:
            RepositoryError: file could not be written
        """
        records = [task.to_record() for task in tasks]
        await asyncio.to_thread(self._write_sync, records)

    def _read_sync(self) -> List[Task]:
        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            self.logger.debug(f"Tasks file {self.file_path} not found, starting empty")
            return []
        except (OSError, ValueError) as e:
            raise RepositoryError(f"Failed to read {self.file_path}: {e}", self.file_path) from e

        if not isinstance(data, list):
            raise RepositoryError(
                f"Expected a JSON array in {self.file_path}, got {type(data).__name__}",
                self.file_path,
            )

        tasks: List[Task] = []
        dropped = 0
        for raw in data:
            if not self._has_minimal_shape(raw):
                dropped += 1
                continue
            task = self._record_to_task(raw)
            if task is None:
                dropped += 1
                continue
            tasks.append(task)

        if dropped:
            self.logger.warning(f"Dropped {dropped} malformed record(s) from {self.file_path}")
        self.logger.debug(f"Loaded {len(tasks)} tasks from {self.file_path}")
        return tasks

    def _write_sync(self, records: List[Dict[str, Any]]) -> None:
        tmp_path: Optional[Path] = None
        try:
            # Ensure directory exists
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                'w',
                encoding='utf-8',
                dir=str(self.file_path.parent),
                prefix=f".{self.file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                json.dump(records, f, ensure_ascii=False, indent=JSON_INDENT)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, self._target_mode())
            os.replace(tmp_path, self.file_path)
            tmp_path = None
        except OSError as e:
            raise RepositoryError(f"Failed to write {self.file_path}: {e}", self.file_path) from e
        finally:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()

        self.logger.debug(f"Saved {len(records)} tasks to {self.file_path}")

    def _target_mode(self) -> int:
        # keep the permissions of an existing file
        try:
            return stat.S_IMODE(os.stat(self.file_path).st_mode)
        except FileNotFoundError:
            return NEW_FILE_MODE

    @staticmethod
    def _has_minimal_shape(raw: Any) -> bool:
        # text id and text title; empty strings cannot form a valid Task
        return (
            isinstance(raw, dict)
            and isinstance(raw.get('id'), str)
            and isinstance(raw.get('title'), str)
            and bool(raw['id'])
            and bool(raw['title'])
        )

    def _record_to_task(self, raw: Dict[str, Any]) -> Optional[Task]:
        record = dict(raw)
        # foreign enum values fall back to defaults instead of failing the whole file
        record['status'] = TaskStatus.from_raw(record.get('status'))
        record['difficulty'] = TaskDifficulty.from_raw(record.get('difficulty'))
        try:
            return Task.model_validate(record)
        except ValidationError as e:
            self.logger.warning(f"Skipping malformed task {raw['id']!r} in {self.file_path}: {e}")
            return None
