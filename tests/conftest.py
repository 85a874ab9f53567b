"""
Shared fixtures: every test gets a fresh, unseeded store and app.
"""
import pytest
from fastapi.testclient import TestClient

from todo_app.app import create_app
from todo_app.config import Config
from todo_app.service import TodoService
from todo_app.store import TaskStore
from todo_client.api_client import TodoApiClient


@pytest.fixture(scope="function")
def store():
    """An empty task store"""
    return TaskStore()


@pytest.fixture(scope="function")
def service(store):
    """A service wrapping the empty store"""
    return TodoService(store)


@pytest.fixture(scope="function")
def api_app(store):
    """API app serving the test store, without demo data"""
    return create_app(Config(overrides={"seed_demo_data": False}), store=store)


@pytest.fixture(scope="function")
def client(api_app):
    """Test client for the API app"""
    with TestClient(api_app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def api_client(client):
    """TodoApiClient that talks to the in-process API app"""
    return TodoApiClient("http://testserver", session=client)
