# Standard library imports
from typing import Any, List, Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field

# Local application imports
from ...domain.models.task import Task


class SearchTasksRequest(BaseModel):
    """DTO for task search request; every field is optional"""
    owner: Any = None
    name: Any = None
    category: Any = None
    operator: Any = None  # "or" for OR, anything else for AND


class DeleteTaskRequest(BaseModel):
    """DTO for task deletion request"""
    model_config = ConfigDict(populate_by_name=True)

    id: Any = None
    user_id: Any = Field(default=None, alias="userId")


class UpdateTaskRequest(BaseModel):
    """DTO for task update request; absent fields keep their stored value"""
    model_config = ConfigDict(populate_by_name=True)

    id: Any = None
    user_id: Any = Field(default=None, alias="userId")
    category: Any = None
    name: Any = None
    description: Any = None


class TaskResponse(BaseModel):
    """DTO for a stored task record"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    owner: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id or "",
            owner=task.owner,
            name=task.name,
            description=task.description,
            category=task.category,
        )

    def to_record(self) -> dict:
        """Record shape as stored: ``_id`` key, absent fields omitted"""
        return self.model_dump(by_alias=True, exclude_none=True)


class TaskListResponse(BaseModel):
    """DTO for the full task listing"""
    tasks: List[TaskResponse]
    total: int
