#!/usr/bin/env python3
"""
Simple web interface for the todo task API
"""
import argparse
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlencode

import uvicorn
from fastapi import FastAPI, Request, Form, Depends
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from todo_app.constants import TaskStatus
from todo_app.exceptions import TaskValidationError
from todo_app.logging_setup import setup_logging
from todo_app.models import validation_error_from
from todo_app.pydantic_models import TaskCreate
from .api_client import ApiError, TodoApiClient
from .config import Config

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def redirect_to(url: str, error: Optional[str] = None) -> RedirectResponse:
    """
    Create a standard redirect response.

    Args:
        url: URL to redirect to
        error: Optional message shown by the target page

    Returns:
        RedirectResponse with status code 302
    """
    if error:
        url = f"{url}?{urlencode({'error': error})}"
    return RedirectResponse(url=url, status_code=302)


def get_api_client(request: Request) -> TodoApiClient:
    """FastAPI dependency that provides the configured API client"""
    return request.app.state.api_client


def _validate_form(name: str, priority: str, status: str = TaskStatus.NOT_STARTED) -> TaskCreate:
    """Check the form against the task constraints before calling the API"""
    try:
        return TaskCreate(name=name, priority=priority, status=status)
    except ValidationError as e:
        raise validation_error_from(e) from e


def _render_index(request: Request, api: TodoApiClient, error: Optional[str] = None,
                  form: Optional[dict] = None) -> HTMLResponse:
    try:
        tasks = api.list_tasks()
    except ApiError as e:
        tasks = []
        error = error or e.message
    return templates.TemplateResponse(request, "index.html", {
        "tasks": tasks,
        "error": error,
        "form": form or {},
        "completed": TaskStatus.COMPLETED,
    })


def _render_edit(request: Request, task: dict, error: Optional[str] = None) -> HTMLResponse:
    return templates.TemplateResponse(request, "edit.html", {
        "task": task,
        "error": error,
        "statuses": TaskStatus.all(),
    })


def create_web_app(api_client: TodoApiClient) -> FastAPI:
    """
    Build the front-end app.

    Args:
        api_client: Client used for every call to the task API
    """
    app = FastAPI(title="Todo Web", docs_url=None, redoc_url=None)
    app.state.api_client = api_client

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request, error: Optional[str] = None,
              api: TodoApiClient = Depends(get_api_client)):
        """List all tasks with an add form"""
        return _render_index(request, api, error=error)

    @app.post("/add", response_class=HTMLResponse)
    def add_task(
        request: Request,
        name: str = Form(""),
        priority: str = Form(""),
        api: TodoApiClient = Depends(get_api_client)
    ):
        """Add a new task"""
        form = {"name": name, "priority": priority}
        try:
            task = _validate_form(name, priority)
            api.add_task(task.name, task.priority)
        except (ApiError, TaskValidationError) as e:
            return _render_index(request, api, error=e.message, form=form)
        return redirect_to("/")

    @app.post("/delete/{task_id}")
    def delete_task(task_id: int, api: TodoApiClient = Depends(get_api_client)):
        """Delete a completed task"""
        try:
            api.delete_task(task_id)
        except ApiError as e:
            return redirect_to("/", error=e.message)
        return redirect_to("/")

    @app.get("/edit/{task_id}", response_class=HTMLResponse)
    def edit_task_form(request: Request, task_id: int, api: TodoApiClient = Depends(get_api_client)):
        """Show the edit form for a task"""
        try:
            task = api.get_task(task_id)
        except ApiError as e:
            return redirect_to("/", error=e.message)
        return _render_edit(request, task)

    @app.post("/edit/{task_id}", response_class=HTMLResponse)
    def edit_task(
        request: Request,
        task_id: int,
        name: str = Form(""),
        priority: str = Form(""),
        status: str = Form(TaskStatus.NOT_STARTED),
        api: TodoApiClient = Depends(get_api_client)
    ):
        """Save changes to a task"""
        task = {"id": task_id, "name": name, "priority": priority, "status": status}
        try:
            valid = _validate_form(name, priority, status)
            api.update_task({
                "id": task_id,
                "name": valid.name,
                "priority": valid.priority,
                "status": valid.status,
            })
        except ApiError as e:
            if e.status_code == 404:
                return redirect_to("/", error=e.message)
            return _render_edit(request, task, error=e.message)
        except TaskValidationError as e:
            return _render_edit(request, task, error=e.message)
        return redirect_to("/")

    return app


def main(argv=None):
    parser = argparse.ArgumentParser(description='Todo Web Client')
    parser.add_argument('--data-dir', default=None, help='Data directory for client files (default: ~/.todo-client)')
    parser.add_argument('--api-url', default=None, help='Base URL of the todo API (default: from config)')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind (default: 127.0.0.1)')
    parser.add_argument('--port', type=int, default=5001, help='Port to run on (default: 5001)')
    parser.add_argument('--log-level', default='INFO', help='Console log level (default: INFO)')
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)
    config = Config(config_dir=args.data_dir)
    api_url = args.api_url or config.server_url
    app = create_web_app(TodoApiClient(api_url, timeout=config.timeout))

    logger.info("Starting todo web client on %s:%s (API: %s)", args.host, args.port, api_url)
    uvicorn.run(app, host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
