"""
In-memory task storage

A single TaskStore instance is created at application start and shared by
all request threads. One re-entrant lock guards both the task collection
and the id counter, so validation, the duplicate-name check and the
insert/update are committed together or not at all.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from pydantic import BaseModel

from .constants import DEMO_TASKS, TaskStatus
from .exceptions import DuplicateNameError, StoreInvariantError, TaskNotFoundError
from .models import Task, build_task
from .rules import find_duplicate, is_deletable

logger = logging.getLogger(__name__)

FIRST_ID = 1


class TaskStore:
    """Thread-safe in-memory task collection with id generation"""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._tasks: Dict[int, Task] = {}
        self._next_id = FIRST_ID

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    @contextmanager
    def locked(self) -> Iterator["TaskStore"]:
        """
        Hold the store lock across several calls.

        The lock is re-entrant, so store methods can be called inside the block.

        Example:
            with store.locked():
                if not store.is_duplicate(name):
                    store.add({...})
        """
        with self._lock:
            yield self

    # ---- queries ----

    def find(self, task_id: int) -> Optional[Task]:
        """Return a copy of the task, or None if absent"""
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy() if task is not None else None

    def get(self, task_id: int) -> Task:
        """
        Get a copy of a task by id.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        task = self.find(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def list_all(self) -> List[Task]:
        """Return copies of all tasks, highest priority (1) first, then by id"""
        with self._lock:
            tasks = sorted(self._tasks.values(), key=lambda t: (t.priority, t.id))
            return [t.model_copy() for t in tasks]

    def is_duplicate(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether another stored task already uses this normalized name"""
        with self._lock:
            return find_duplicate(self._tasks.values(), name, exclude_id) is not None

    # ---- mutations ----

    def add(self, candidate: Union[BaseModel, Mapping[str, Any]]) -> Task:
        """
        Validate and store a new task.

        Any id on the candidate is ignored; the store assigns the next one.
        A missing status defaults to NotStarted.

        Args:
            candidate: A TaskCreate (or any model/mapping with name, priority, status)

        Returns:
            A copy of the stored task

        Raises:
            TaskValidationError: If a field is invalid
            DuplicateNameError: If another task has the same normalized name
            StoreInvariantError: If the generated id is already taken
        """
        fields = _as_dict(candidate)
        with self._lock:
            task_id = self._next_id
            task = build_task({
                "id": task_id,
                "name": fields.get("name"),
                "priority": fields.get("priority"),
                "status": fields.get("status") or TaskStatus.NOT_STARTED,
            })

            existing = find_duplicate(self._tasks.values(), task.name)
            if existing is not None:
                raise DuplicateNameError(task.name, existing.id)

            if task_id in self._tasks:
                raise StoreInvariantError(f"Identifier {task_id} is already assigned")

            self._tasks[task_id] = task
            self._next_id = task_id + 1
            logger.debug("Stored task id=%s name=%r", task_id, task.name)
            return task.model_copy()

    def update(
        self,
        task_id: int,
        name: Optional[str] = None,
        priority: Optional[int] = None,
        status: Optional[str] = None
    ) -> Task:
        """
        Replace a task's editable fields.

        Fields passed as None keep their current value. The new record is fully
        validated before it replaces the old one, so a failed update leaves
        the stored task untouched.

        Returns:
            A copy of the updated task

        Raises:
            TaskNotFoundError: If no task has this id
            TaskValidationError: If a field is invalid
            DuplicateNameError: If another task has the same normalized name
        """
        with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                raise TaskNotFoundError(task_id)

            merged = current.model_dump()
            for key, value in (("name", name), ("priority", priority), ("status", status)):
                if value is not None:
                    merged[key] = value
            updated = build_task(merged)

            existing = find_duplicate(self._tasks.values(), updated.name, exclude_id=task_id)
            if existing is not None:
                raise DuplicateNameError(updated.name, existing.id)

            self._tasks[task_id] = updated
            logger.debug("Updated task id=%s", task_id)
            return updated.model_copy()

    def remove(self, task_id: int) -> bool:
        """
        Remove a completed task.

        Returns:
            True if the task was removed; False if it does not exist or is not completed
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None or not is_deletable(task):
                return False
            del self._tasks[task_id]
            logger.debug("Removed task id=%s", task_id)
            return True

    def clear(self) -> None:
        """Remove all tasks and restart ids at 1. Used for test isolation."""
        with self._lock:
            self._tasks.clear()
            self._next_id = FIRST_ID

    def seed(self, tasks: Iterable[Mapping[str, Any]] = DEMO_TASKS) -> List[Task]:
        """
        Add demonstration tasks if the store is empty.

        Returns:
            The tasks that were added (empty if the store already had tasks)
        """
        with self._lock:
            if self._tasks:
                return []
            added = [self.add(data) for data in tasks]
        logger.info("Seeded %d demo task(s)", len(added))
        return added


def _as_dict(candidate: Union[BaseModel, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(candidate, BaseModel):
        return candidate.model_dump()
    return dict(candidate)
