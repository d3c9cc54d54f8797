from .message_dto import MessageResponse, ErrorResponse
from .task_dto import (
    SearchTasksRequest,
    DeleteTaskRequest,
    UpdateTaskRequest,
    TaskResponse,
    TaskListResponse,
)

__all__ = [
    "MessageResponse",
    "ErrorResponse",
    "SearchTasksRequest",
    "DeleteTaskRequest",
    "UpdateTaskRequest",
    "TaskResponse",
    "TaskListResponse",
]
