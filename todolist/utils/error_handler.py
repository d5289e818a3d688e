"""
Error handling utilities
"""

from pathlib import Path
from typing import Any, List, Optional, Union
from todolist.models.response import ErrorResponse
from todolist.utils.logger import logger


class TaskListError(Exception):
    """Base exception for task list errors"""
    pass


class TaskValidationError(TaskListError, ValueError):
    """Raised when a task payload or a set of changes is invalid"""
    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(self.message)


class RepositoryError(TaskListError):
    """Raised when the task file cannot be read or written"""
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.message = message
        self.path = str(path) if path is not None else None
        super().__init__(self.message)


def handle_error(error: Exception) -> ErrorResponse:
    """
    Handle error and return user-friendly response

    Args:
        error: Exception to handle

    Returns:
        ErrorResponse with user-friendly message
    """
    logger.error(f"Error occurred: {error}", exc_info=True)

    if isinstance(error, TaskValidationError):
        return ErrorResponse(
            message=f"Invalid task: {error.message}",
            error_code="validation",
            details={"errors": error.errors} if error.errors else None,
        )

    if isinstance(error, RepositoryError):
        return ErrorResponse(
            message=f"Storage error: {error.message}",
            error_code="repository",
            details={"path": error.path} if error.path else None,
        )

    # Generic error message
    return ErrorResponse(
        message="Unexpected error. Check the logs for details.",
    )


def format_error_message(error: Exception) -> str:
    """
    Format error message for the user

    Args:
        error: Exception to format

    Returns:
        User-friendly error message
    """
    error_response = handle_error(error)
    return error_response.message
