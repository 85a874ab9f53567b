"""
Task API routes
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response

from ...crud_helpers import get_or_404, error_detail
from ...dependencies import get_service
from ...exceptions import DuplicateNameError, TaskNotDeletableError, TaskNotFoundError, TaskValidationError
from ...models import Task
from ...pydantic_models import TaskCreate, TaskUpdate
from ...service import TodoService

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=List[Task])
def list_tasks(service: TodoService = Depends(get_service)):
    """List all tasks ordered by priority"""
    return service.list_tasks()


@router.get("/{task_id}", response_model=Task)
def get_task(task_id: int, service: TodoService = Depends(get_service)):
    """Get a task by ID"""
    return get_or_404(service, task_id)


@router.post("", response_model=Task, status_code=201)
def create_task(
    request: TaskCreate,
    response: Response,
    service: TodoService = Depends(get_service)
):
    """Create a new task"""
    try:
        task = service.add_task(request)
    except TaskValidationError as e:
        raise HTTPException(status_code=400, detail=error_detail(e))
    except DuplicateNameError as e:
        raise HTTPException(status_code=409, detail=error_detail(e))

    response.headers["Location"] = f"/tasks/{task.id}"
    return task


@router.put("/{task_id}", status_code=204)
def update_task(
    task_id: int,
    request: TaskUpdate,
    service: TodoService = Depends(get_service)
):
    """Update a task's name, priority and status"""
    # The ID in the body, when given, must match the ID in the URL
    if request.id is not None and request.id != task_id:
        raise HTTPException(status_code=400, detail="ID in URL must match ID in body.")

    try:
        service.update_task(task_id, request)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except TaskValidationError as e:
        raise HTTPException(status_code=400, detail=error_detail(e))
    except DuplicateNameError as e:
        raise HTTPException(status_code=409, detail=error_detail(e))
    return Response(status_code=204)


@router.delete("/{task_id}", status_code=204)
def delete_task(task_id: int, service: TodoService = Depends(get_service)):
    """Delete a task; only completed tasks can be deleted"""
    try:
        service.delete_task(task_id)
    except (TaskNotFoundError, TaskNotDeletableError) as e:
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=204)
