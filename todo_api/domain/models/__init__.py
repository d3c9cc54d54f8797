from .user import User
from .task import Task
from .task_filter import TaskFilter, FilterMode

__all__ = ["User", "Task", "TaskFilter", "FilterMode"]
