"""
Helpers shared by the task API routes.

These extract common patterns like:
- Get-or-404 logic
- Turning domain errors into HTTPException with a field-level detail body
"""
from fastapi import HTTPException

from .exceptions import TaskNotFoundError, TodoError
from .models import Task
from .service import TodoService


def get_or_404(service: TodoService, task_id: int) -> Task:
    """
    Get a task by ID or raise 404 if not found.

    Args:
        service: The task service
        task_id: The task identifier

    Returns:
        The task

    Raises:
        HTTPException: 404 if the task does not exist
    """
    try:
        return service.get_task(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


def error_detail(error: TodoError) -> dict:
    """
    Build the JSON detail for a field-level error.

    Consumers read "message" for display and "field"/"value" to point at the
    input that needs correcting.
    """
    return {
        "message": error.message,
        "field": getattr(error, "field", None),
        "value": getattr(error, "value", None),
    }
