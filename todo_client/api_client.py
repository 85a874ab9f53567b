"""
HTTP client for the todo task API
"""
import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """The API rejected a request or could not be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None, field: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.field = field
        super().__init__(self.message)


class TodoApiClient:
    """Calls the task endpoints and turns error responses into ApiError

    Args:
        base_url: Server root, e.g. "http://localhost:8000"
        session: Object with requests-style get/post/put/delete methods
            (defaults to a new requests.Session)
        timeout: Per-request timeout in seconds
    """

    def __init__(self, base_url: str, session=None, timeout: float = 10.0):
        self.base_url = base_url.rstrip('/')
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(self, method: str, path: str, **kwargs):
        try:
            return getattr(self.session, method)(self._url(path), timeout=self.timeout, **kwargs)
        except requests.exceptions.ConnectionError as e:
            logger.warning("Could not connect to %s: %s", self.base_url, e)
            raise ApiError(f"Could not connect to the API server at {self.base_url}.") from e

    def list_tasks(self) -> List[Dict[str, Any]]:
        """Return all tasks, highest priority first"""
        response = self._request("get", "/tasks")
        if response.status_code != 200:
            raise _error_from(response, "Could not retrieve tasks")
        return response.json()

    def get_task(self, task_id: int) -> Dict[str, Any]:
        response = self._request("get", f"/tasks/{task_id}")
        if response.status_code == 404:
            raise ApiError("Task with the specified ID was not found (404).", status_code=404)
        if response.status_code != 200:
            raise _error_from(response, "Could not retrieve task")
        return response.json()

    def add_task(self, name: str, priority: int, status: Optional[str] = None) -> Dict[str, Any]:
        """
        Create a task.

        Returns:
            The created task as returned by the server

        Raises:
            ApiError: 409 with the server's duplicate-name message, 400 on
                validation failure, or any other unexpected status
        """
        body = {"name": name, "priority": priority}
        if status is not None:
            body["status"] = status
        response = self._request("post", "/tasks", json=body)
        if response.status_code == 201:
            return response.json()
        raise _error_from(response, "Could not create task")

    def update_task(self, task: Dict[str, Any]) -> None:
        """
        Replace a task's name, priority and status.

        Args:
            task: Mapping with id, name, priority and optionally status

        Raises:
            ApiError: 404 if the task is gone, 409 on duplicate name, 400 on validation failure
        """
        body = {k: task.get(k) for k in ("id", "name", "priority", "status") if task.get(k) is not None}
        response = self._request("put", f"/tasks/{task['id']}", json=body)
        if response.status_code == 204:
            return
        if response.status_code == 404:
            raise ApiError("Task not found.", status_code=404)
        raise _error_from(response, "Could not update task")

    def delete_task(self, task_id: int) -> None:
        """
        Delete a completed task.

        Raises:
            ApiError: 404 if the task does not exist or is not completed
        """
        response = self._request("delete", f"/tasks/{task_id}")
        if response.status_code == 204:
            return
        raise _error_from(response, "Could not delete task")


def _error_from(response, fallback: str) -> ApiError:
    """Build an ApiError from an error response"""
    status = response.status_code
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None

    if status == 409 and isinstance(detail, dict):
        return ApiError(detail.get("message", "Conflict"), status_code=409, field=detail.get("field"))

    if status == 400:
        field = detail.get("field") if isinstance(detail, dict) else None
        message = "Validation failed on the server."
        if isinstance(detail, dict) and detail.get("message"):
            message = f"{message} {detail['message']}"
        elif isinstance(detail, str):
            message = f"{message} {detail}"
        return ApiError(message, status_code=400, field=field)

    if isinstance(detail, str):
        return ApiError(detail, status_code=status)

    return ApiError(f"{fallback}. API Error: {status}", status_code=status)
