# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.task_repository import TaskRepository
from ...domain.models.task import Task
from ...domain.models.task_filter import FilterMode, TaskFilter
from ...domain.constants import TaskFields
from ...domain.exceptions import StoreError


def filter_to_query(task_filter: TaskFilter) -> Dict[str, Any]:
    """
    Translate a TaskFilter into a MongoDB query document

    Empty -> ``{}``; AND -> ``{field: value, ...}``;
    OR -> ``{"$or": [{field: value}, ...]}``.
    """
    if task_filter.is_empty:
        return {}
    if task_filter.mode is FilterMode.OR:
        return {"$or": [{field: value} for field, value in task_filter.clauses]}
    return {field: value for field, value in task_filter.clauses}


def _to_object_id(task_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(task_id)
    except (InvalidId, TypeError):
        return None


class MongoTaskRepository(TaskRepository):
    """MongoDB implementation of TaskRepository"""

    def __init__(self, task_collection: AsyncIOMotorCollection) -> None:
        self.task_collection = task_collection

    async def find_all(self) -> List[Task]:
        """Return every task"""
        return await self.find(TaskFilter())

    async def find(self, task_filter: TaskFilter) -> List[Task]:
        """Return tasks matching a filter expression"""
        try:
            cursor = self.task_collection.find(filter_to_query(task_filter))
            tasks = []
            async for document in cursor:
                tasks.append(self._document_to_task(document))
            return tasks
        except Exception as e:
            raise StoreError(str(e)) from e

    async def find_by_id(self, task_id: str) -> Optional[Task]:
        """
        Find task by ID

        Args:
            task_id: Hex ObjectId string

        Returns:
            Task domain model if found, None otherwise (also for malformed IDs)
        """
        object_id = _to_object_id(task_id) if task_id else None
        if object_id is None:
            return None

        try:
            document = await self.task_collection.find_one({TaskFields.MONGO_ID: object_id})
        except Exception as e:
            raise StoreError(str(e)) from e

        if document is None:
            return None
        return self._document_to_task(document)

    async def save(self, task: Task) -> Task:
        """
        Save task (create new or overwrite fields of an existing one)

        Args:
            task: Task domain model to save

        Returns:
            Saved Task domain model with ID set
        """
        if not task:
            raise ValueError("Task cannot be None")

        task_dict = self._task_to_dict(task)

        if task.id:
            object_id = _to_object_id(task.id)
            if object_id is None:
                raise ValueError(f"Invalid task ID format: {task.id}")
            try:
                await self.task_collection.update_one(
                    {TaskFields.MONGO_ID: object_id},
                    {"$set": task_dict},
                )
            except Exception as e:
                raise StoreError(str(e)) from e
            return task

        try:
            result = await self.task_collection.insert_one(task_dict)
        except Exception as e:
            raise StoreError(str(e)) from e

        return Task(
            id=str(result.inserted_id),
            owner=task.owner,
            name=task.name,
            description=task.description,
            category=task.category,
        )

    async def delete(self, task_id: str) -> bool:
        """Delete task by ID"""
        object_id = _to_object_id(task_id) if task_id else None
        if object_id is None:
            return False

        try:
            result = await self.task_collection.delete_one({TaskFields.MONGO_ID: object_id})
        except Exception as e:
            raise StoreError(str(e)) from e
        return result.deleted_count > 0

    def _document_to_task(self, document: Dict[str, Any]) -> Task:
        """Convert MongoDB document to Task domain model"""
        if not document or TaskFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Task(
            id=str(document[TaskFields.MONGO_ID]),
            owner=document.get(TaskFields.OWNER),
            name=document.get(TaskFields.NAME),
            description=document.get(TaskFields.DESCRIPTION),
            category=document.get(TaskFields.CATEGORY),
        )

    def _task_to_dict(self, task: Task) -> Dict[str, Any]:
        """Convert Task domain model to MongoDB document (absent fields omitted)"""
        return task.to_payload()
