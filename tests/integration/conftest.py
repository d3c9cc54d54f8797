"""
Fixtures for API tests: the real app with the container swapped for one
backed by in-memory repositories (no real DB).
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from todo_api.di.base_container import BaseContainer
from todo_api.di.container import get_container
from todo_api.di.providers import AuthProvider, TaskProvider
from todo_api.domain.repositories.task_repository import TaskRepository
from todo_api.domain.repositories.user_repository import UserRepository


@pytest.fixture
def test_container(user_repo, task_repo):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(TaskRepository, task_repo)
    AuthProvider.register(container)
    TaskProvider.register(container)
    return container


@pytest.fixture
def client(test_container, mock_settings):
    """Create test client with the in-memory container."""
    from todo_api.main import app

    app.dependency_overrides[get_container] = lambda: test_container
    with patch("todo_api.main.ping_database", AsyncMock(return_value=True)):
        with TestClient(app) as c:
            yield c
    app.dependency_overrides.clear()


@pytest.fixture
def lenient_client(test_container, mock_settings):
    """Test client that returns 500 responses instead of re-raising server errors."""
    from todo_api.main import app

    app.dependency_overrides[get_container] = lambda: test_container
    with patch("todo_api.main.ping_database", AsyncMock(return_value=True)):
        with TestClient(app, raise_server_exceptions=False) as c:
            yield c
    app.dependency_overrides.clear()
