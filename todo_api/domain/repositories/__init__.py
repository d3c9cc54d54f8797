from .user_repository import UserRepository
from .task_repository import TaskRepository

__all__ = ["UserRepository", "TaskRepository"]
