from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.task import Task
from ..models.task_filter import TaskFilter


class TaskRepository(ABC):
    """Repository interface - defines contract for task data access"""

    @abstractmethod
    async def find_all(self) -> List[Task]:
        """Return every task"""
        pass

    @abstractmethod
    async def find(self, task_filter: TaskFilter) -> List[Task]:
        """Return tasks matching a filter expression"""
        pass

    @abstractmethod
    async def find_by_id(self, task_id: str) -> Optional[Task]:
        """Find task by ID"""
        pass

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """Save task (create or update)"""
        pass

    @abstractmethod
    async def delete(self, task_id: str) -> bool:
        """Delete task by ID, returning whether a document was removed"""
        pass
