"""
Tests for the command line client
"""
import json

import pytest
from click.testing import CliRunner

from todo_app.constants import TaskStatus
from todo_client.cli import ClientContext, cli


@pytest.fixture(scope="function")
def run(api_client, tmp_path):
    """Invoke the CLI against the in-process API"""
    runner = CliRunner()

    def _run(*args):
        obj = ClientContext(data_dir=str(tmp_path), api=api_client)
        return runner.invoke(cli, list(args), obj=obj)

    return _run


class TestCommands:
    """Test CLI commands"""

    def test_list_empty(self, run):
        result = run("list")
        assert result.exit_code == 0
        assert "No tasks." in result.output

    def test_add_and_list(self, run):
        result = run("add", "Write report", "--priority", "2")
        assert result.exit_code == 0
        assert "Created task 1: Write report" in result.output

        result = run("list")
        assert "Write report" in result.output
        assert "Priority" in result.output

    def test_add_priority_out_of_range(self, run, api_client):
        """Test click rejects priorities outside 1..10"""
        result = run("add", "Too low", "-p", "0")
        assert result.exit_code != 0
        assert api_client.list_tasks() == []

    def test_add_duplicate(self, run):
        run("add", "Write report", "-p", "2")
        result = run("add", "write REPORT", "-p", "3")
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_show(self, run, api_client):
        task = api_client.add_task("Show me", 4)
        result = run("show", str(task["id"]))
        assert result.exit_code == 0
        assert "Show me" in result.output

    def test_update_keeps_other_fields(self, run, api_client):
        task = api_client.add_task("Keep name", 4)
        result = run("update", str(task["id"]), "--status", TaskStatus.COMPLETED)
        assert result.exit_code == 0

        updated = api_client.get_task(task["id"])
        assert updated["name"] == "Keep name"
        assert updated["priority"] == 4
        assert updated["status"] == TaskStatus.COMPLETED

    def test_delete(self, run, api_client):
        task = api_client.add_task("Finished", 1, TaskStatus.COMPLETED)
        result = run("delete", str(task["id"]))
        assert result.exit_code == 0
        assert f"Deleted task {task['id']}" in result.output

    def test_delete_unfinished(self, run, api_client):
        task = api_client.add_task("Unfinished", 1)
        result = run("delete", str(task["id"]))
        assert result.exit_code == 1
        assert "cannot be deleted" in result.output

    def test_show_missing(self, run):
        result = run("show", "9999")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestConfigCommand:
    """Test the config command"""

    def test_set_server(self, run, tmp_path):
        result = run("config", "--server", "http://example.com:9000/")
        assert result.exit_code == 0

        saved = json.loads((tmp_path / "config.json").read_text())
        assert saved["server_url"] == "http://example.com:9000"

    def test_show_config(self, run, monkeypatch):
        monkeypatch.delenv("TODO_CLIENT_SERVER_URL", raising=False)
        result = run("config")
        assert "http://localhost:8000" in result.output
