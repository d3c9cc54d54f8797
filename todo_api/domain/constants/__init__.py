"""Constants for domain model field names"""

from .user_fields import UserFields
from .task_fields import TaskFields, TaskCategory

__all__ = [
    "UserFields",
    "TaskFields",
    "TaskCategory",
]
