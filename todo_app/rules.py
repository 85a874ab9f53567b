"""
Business rules that span more than a single task field

These helpers are pure; TaskStore evaluates them inside its lock so a
check and the mutation that depends on it happen as one step.
"""
from typing import Iterable, Optional

from .constants import TaskStatus
from .models import Task


def normalize_name(name: str) -> str:
    """
    Normalize a task name for uniqueness comparison.

    Leading/trailing whitespace is removed and case is folded, so
    " Task B " and "task b" compare equal.

    Args:
        name: Raw task name

    Returns:
        The normalized name
    """
    return name.strip().casefold()


def find_duplicate(tasks: Iterable[Task], name: str, exclude_id: Optional[int] = None) -> Optional[Task]:
    """
    Find a task whose normalized name collides with the given name.

    Args:
        tasks: Tasks to compare against
        name: Candidate name (raw or trimmed)
        exclude_id: Id of a task to skip, used when a task is updated to its own name

    Returns:
        The colliding task, or None if the name is free
    """
    wanted = normalize_name(name)
    for task in tasks:
        if task.id == exclude_id:
            continue
        if normalize_name(task.name) == wanted:
            return task
    return None


def is_deletable(task: Task) -> bool:
    """Only completed tasks may be removed"""
    return task.status == TaskStatus.COMPLETED
