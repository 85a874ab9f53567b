"""
Task service: the business-rule layer the HTTP routes talk to
"""
import logging
from typing import List, Optional

from .exceptions import DuplicateNameError, TaskNotDeletableError, TaskNotFoundError, TaskValidationError
from .models import Task
from .pydantic_models import TaskCreate, TaskUpdate
from .store import TaskStore

logger = logging.getLogger(__name__)


class TodoService:
    """Applies the duplicate-name and completion-gated deletion rules on top of a TaskStore"""

    def __init__(self, store: TaskStore):
        self.store = store

    def is_duplicate_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """
        Check the duplicate-name rule.

        Args:
            name: Proposed task name; compared trimmed and case-insensitively
            exclude_id: Task to ignore, so a task may keep its own name on update

        Returns:
            True if another task already uses the name
        """
        return self.store.is_duplicate(name, exclude_id)

    def list_tasks(self) -> List[Task]:
        return self.store.list_all()

    def get_task(self, task_id: int) -> Task:
        return self.store.get(task_id)

    def add_task(self, request: TaskCreate) -> Task:
        """
        Create a task.

        Raises:
            TaskValidationError: If a field is invalid
            DuplicateNameError: If the name is already in use
        """
        try:
            task = self.store.add(request)
        except (TaskValidationError, DuplicateNameError) as e:
            logger.warning("Rejected new task %r: %s", request.name, e.message)
            raise
        logger.info("Created task id=%s name=%r priority=%s status=%s",
                    task.id, task.name, task.priority, task.status)
        return task

    def update_task(self, task_id: int, request: TaskUpdate) -> Task:
        """
        Replace a task's name, priority and (optionally) status.

        Raises:
            TaskNotFoundError: If the task does not exist
            TaskValidationError: If a field is invalid
            DuplicateNameError: If another task already uses the name
        """
        try:
            task = self.store.update(
                task_id,
                name=request.name,
                priority=request.priority,
                status=request.status
            )
        except (TaskValidationError, DuplicateNameError) as e:
            logger.warning("Rejected update of task %s: %s", task_id, e.message)
            raise
        logger.info("Updated task id=%s name=%r priority=%s status=%s",
                    task.id, task.name, task.priority, task.status)
        return task

    def delete_task(self, task_id: int) -> None:
        """
        Delete a completed task.

        Raises:
            TaskNotFoundError: If the task does not exist
            TaskNotDeletableError: If the task exists but is not completed
        """
        with self.store.locked():
            if self.store.remove(task_id):
                logger.info("Deleted task id=%s", task_id)
                return
            task = self.store.find(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            logger.warning("Refused to delete task id=%s with status %s", task_id, task.status)
            raise TaskNotDeletableError(task_id, task.status)

    def seed_demo_tasks(self) -> List[Task]:
        return self.store.seed()
