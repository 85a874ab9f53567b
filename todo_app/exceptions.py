"""
Domain errors raised by the task store and the service layer
"""
from typing import Any, Optional


class TodoError(Exception):
    """Base class for all task service errors"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TaskValidationError(TodoError):
    """A task field failed its length, range or value constraint"""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(message)


class DuplicateNameError(TodoError):
    def __init__(self, name: str, existing_id: Optional[int] = None):
        self.field = "name"
        self.value = name
        self.name = name
        self.existing_id = existing_id
        super().__init__(f"A task named '{name}' already exists.")


class TaskNotFoundError(TodoError):
    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} not found.")


class TaskNotDeletableError(TodoError):
    """Task exists but is not completed, so it cannot be removed"""

    def __init__(self, task_id: int, status: str):
        self.task_id = task_id
        self.status = status
        super().__init__(
            f"Task {task_id} is {status} and cannot be deleted. Only completed tasks can be deleted."
        )


class StoreInvariantError(TodoError):
    """The store detected a broken invariant, such as an identifier collision"""
