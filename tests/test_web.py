"""
Tests for the web front end
"""
import pytest
from fastapi.testclient import TestClient

from todo_app.constants import TaskStatus
from todo_client.web import create_web_app


@pytest.fixture(scope="function")
def web(api_client):
    """Test client for the web app, backed by the in-process API"""
    with TestClient(create_web_app(api_client)) as test_client:
        yield test_client


class TestIndex:
    """Test the task list page"""

    def test_empty_list(self, web):
        response = web.get("/")
        assert response.status_code == 200
        assert "No tasks yet." in response.text

    def test_lists_tasks(self, web, api_client):
        api_client.add_task("Visible Task", 2)
        response = web.get("/")
        assert "Visible Task" in response.text

    def test_delete_button_only_for_completed(self, web, api_client):
        """Test only completed tasks get a delete form"""
        done = api_client.add_task("Finished", 1, TaskStatus.COMPLETED)
        open_task = api_client.add_task("Open", 2)
        response = web.get("/")
        assert f'action="/delete/{done["id"]}"' in response.text
        assert f'action="/delete/{open_task["id"]}"' not in response.text

    def test_error_query_is_shown(self, web):
        response = web.get("/", params={"error": "Something went wrong"})
        assert 'role="alert"' in response.text
        assert "Something went wrong" in response.text


class TestAdd:
    """Test the add form"""

    def test_add_redirects(self, web, api_client):
        response = web.post("/add", data={"name": "From form", "priority": "4"}, follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/"
        assert [t["name"] for t in api_client.list_tasks()] == ["From form"]

    def test_add_invalid_rerenders_form(self, web, api_client):
        """Test a short name is rejected before reaching the API"""
        response = web.post("/add", data={"name": "ab", "priority": "4"})
        assert response.status_code == 200
        assert 'role="alert"' in response.text
        assert 'value="ab"' in response.text
        assert api_client.list_tasks() == []

    def test_add_duplicate_shows_server_message(self, web, api_client):
        api_client.add_task("Taken", 1)
        response = web.post("/add", data={"name": "taken", "priority": "3"})
        assert response.status_code == 200
        assert "already exists" in response.text
        assert len(api_client.list_tasks()) == 1


class TestEditAndDelete:
    """Test the edit and delete actions"""

    def test_edit_form(self, web, api_client):
        task = api_client.add_task("Edit Me", 5)
        response = web.get(f"/edit/{task['id']}")
        assert response.status_code == 200
        assert 'value="Edit Me"' in response.text

    def test_edit_missing_redirects(self, web):
        response = web.get("/edit/9999", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"].startswith("/?error=")

    def test_edit_saves(self, web, api_client):
        task = api_client.add_task("Edit Me", 5)
        response = web.post(
            f"/edit/{task['id']}",
            data={"name": "Edited", "priority": "2", "status": TaskStatus.IN_PROGRESS},
            follow_redirects=False,
        )
        assert response.status_code == 302
        saved = api_client.get_task(task["id"])
        assert saved["name"] == "Edited"
        assert saved["status"] == TaskStatus.IN_PROGRESS

    def test_edit_duplicate_rerenders(self, web, api_client):
        api_client.add_task("Existing Name", 1)
        task = api_client.add_task("Mine", 5)
        response = web.post(
            f"/edit/{task['id']}",
            data={"name": "existing name", "priority": "5", "status": TaskStatus.NOT_STARTED},
        )
        assert response.status_code == 200
        assert "already exists" in response.text
        assert api_client.get_task(task["id"])["name"] == "Mine"

    def test_delete_completed(self, web, api_client):
        task = api_client.add_task("Done", 1, TaskStatus.COMPLETED)
        response = web.post(f"/delete/{task['id']}", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/"
        assert api_client.list_tasks() == []

    def test_delete_unfinished_redirects_with_error(self, web, api_client):
        task = api_client.add_task("Not done", 1)
        response = web.post(f"/delete/{task['id']}", follow_redirects=False)
        assert response.status_code == 302
        assert "error=" in response.headers["location"]
        assert len(api_client.list_tasks()) == 1
