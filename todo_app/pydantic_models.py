"""
Pydantic request models for API endpoints
"""
from typing import Optional
from pydantic import BaseModel, field_validator

from .constants import TaskStatus
from .models import TaskBase


class TaskCreate(TaskBase):
    """Request model for creating a task

    Status is optional and defaults to NotStarted. Any id in the body is ignored.
    """


class TaskUpdate(BaseModel):
    """Request model for replacing a task's editable fields

    Name and priority are validated by the store against the Task entity,
    so a request that parses here can still be rejected with a 400.
    """
    id: Optional[int] = None
    name: str
    priority: int
    status: Optional[str] = None

    @field_validator("status")
    @classmethod
    def check_status(cls, value):
        if value is not None and not TaskStatus.is_valid(value):
            raise ValueError(f"Invalid status. Must be one of: {', '.join(TaskStatus.all())}")
        return value
