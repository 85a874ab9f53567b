"""
Task entity models

These are plain (non-table) SQLModel classes, so every construction goes
through pydantic validation. The same models are shared by the API, the
store and the front end.
"""
from typing import Any, Dict

from pydantic import ValidationError, field_validator
from sqlmodel import SQLModel, Field

from .constants import (
    TaskStatus,
    NAME_MIN_LENGTH,
    NAME_MAX_LENGTH,
    PRIORITY_HIGHEST,
    PRIORITY_LOWEST,
)
from .exceptions import TaskValidationError


class TaskBase(SQLModel):
    """Fields shared by stored tasks and create requests"""
    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    priority: int = Field(ge=PRIORITY_HIGHEST, le=PRIORITY_LOWEST)  # 1 = highest
    status: str = Field(default=TaskStatus.NOT_STARTED)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("status")
    @classmethod
    def check_status(cls, value):
        if not TaskStatus.is_valid(value):
            raise ValueError(f"Invalid status. Must be one of: {', '.join(TaskStatus.all())}")
        return value


class Task(TaskBase):
    """A stored task; the id is assigned by TaskStore"""
    id: int = Field(gt=0)


def build_task(data: Dict[str, Any]) -> Task:
    """
    Validate raw field values into a Task.

    Args:
        data: Mapping with id, name, priority and status

    Returns:
        A validated Task with a trimmed name

    Raises:
        TaskValidationError: If any field violates its constraint. Only the
            first offending field is reported.
    """
    try:
        return Task.model_validate(data)
    except ValidationError as e:
        raise validation_error_from(e) from e


def validation_error_from(error: ValidationError) -> TaskValidationError:
    """Convert a pydantic ValidationError into a TaskValidationError"""
    first = error.errors()[0]
    loc = first.get("loc") or ()
    field = str(loc[0]) if loc else None
    message = first.get("msg", "Invalid value")
    if field:
        message = f"{field}: {message}"
    return TaskValidationError(message, field=field, value=first.get("input"))
