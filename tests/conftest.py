"""
Shared pytest fixtures for To-do API tests.
"""
import os
from dataclasses import replace
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from todo_api.domain.models.task import Task
from todo_api.domain.models.task_filter import TaskFilter
from todo_api.domain.models.user import User
from todo_api.domain.repositories.task_repository import TaskRepository
from todo_api.domain.repositories.user_repository import UserRepository


OWNER_ID = "0123456789abcdef"
OTHER_OWNER_ID = "fedcba9876543210"


class InMemoryTaskRepository(TaskRepository):
    """Dict-backed TaskRepository that evaluates TaskFilter like the store would."""

    def __init__(self) -> None:
        self.tasks: Dict[str, Task] = {}
        self.save_calls = 0

    async def find_all(self) -> List[Task]:
        return list(self.tasks.values())

    async def find(self, task_filter: TaskFilter) -> List[Task]:
        return [task for task in self.tasks.values() if task_filter.matches(task.to_payload())]

    async def find_by_id(self, task_id: str) -> Optional[Task]:
        task = self.tasks.get(task_id)
        return replace(task) if task else None

    async def save(self, task: Task) -> Task:
        self.save_calls += 1
        if not task.id:
            task = replace(task, id=str(ObjectId()))
        self.tasks[task.id] = replace(task)
        return task

    async def delete(self, task_id: str) -> bool:
        return self.tasks.pop(task_id, None) is not None


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository keyed by email."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        return self.users.get(email)

    async def save(self, user: User) -> User:
        saved = replace(user, id=str(ObjectId()))
        self.users[saved.email] = saved
        return saved


@pytest.fixture
def task_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_todo_db",
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.bcrypt_rounds = 4
    mock.cors_origins = ["*"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("todo_api.core.config.get_settings", return_value=mock), patch(
        "todo_api.core.security.get_settings", return_value=mock
    ):
        yield mock
