"""
Demo entry point: runs a short example flow against data/tareas.json
"""

import asyncio
from datetime import timedelta
from typing import Optional
from todolist.config.settings import settings
from todolist.models.task import TaskDifficulty
from todolist.services.task_manager import TaskManager
from todolist.services.task_repository import TaskRepository
from todolist.utils.date_utils import get_current_datetime, to_iso
from todolist.utils.error_handler import TaskListError, format_error_message
from todolist.utils.formatters import format_statistics, format_task_list
from todolist.utils.logger import logger

DEMO_TASKS_FILE = "data/tareas.json"


async def example_flow(repository: Optional[TaskRepository] = None) -> TaskManager:
    """
    Add a task, list tasks by due date and print statistics

    Args:
        repository: Repository to use (defaults to data/tareas.json)

    Returns:
        Manager used by the flow
    """
    manager = TaskManager(repository or TaskRepository(DEMO_TASKS_FILE))

    try:
        task = await manager.add({
            "title": "Prepare presentation",
            "dueDate": to_iso(get_current_datetime() + timedelta(days=1)),
            "difficulty": TaskDifficulty.HIGH,
            "priority": 5,
            "tags": ["university", "exam"],
        })
        logger.info(f"Task created: {task.id}")
    except TaskListError as e:
        logger.warning(f"Task not created: {format_error_message(e)}")

    tasks = await manager.list(sort_by="dueDate")
    logger.info(format_task_list(tasks, header="Tasks by due date:"))

    stats = await manager.statistics()
    logger.info(format_statistics(stats))
    return manager


async def main():
    """Main entry point"""
    settings.validate()
    logger.info("Running example flow")
    try:
        await example_flow()
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        raise
    logger.info("Done")


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
