"""
FastAPI dependency functions

This module provides shared dependency functions that can be imported
by both the app factory and router modules.
"""
from fastapi import Request

from .service import TodoService


def get_service(request: Request) -> TodoService:
    """
    FastAPI dependency that provides the application's TodoService.

    The service is created once by create_app() and stored on app.state,
    so every request thread shares the same TaskStore.

    Example:
        @router.get("/items")
        def list_items(service: TodoService = Depends(get_service)):
            return service.list_tasks()
    """
    return request.app.state.service
