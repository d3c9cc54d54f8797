# Standard library imports
import logging
from typing import Any, Mapping

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.models.task import Task
from ....domain.constants import TaskFields
from ....domain.exceptions import InvalidPayloadError
from ...dto.message_dto import MessageResponse
from ...validation import validate_task_payload

logger = logging.getLogger(__name__)


class AddTaskUseCase:
    """Use case for creating a task"""

    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository

    async def execute(self, payload: Mapping[str, Any]) -> MessageResponse:
        """
        Create a new task

        Tasks are inserted unconditionally; identical tasks may coexist.

        Args:
            payload: Task body with owner, name, description and category

        Returns:
            MessageResponse confirming creation

        Raises:
            InvalidPayloadError: If the payload fails the task schema
            StoreError: If the store fails
        """
        validation = validate_task_payload(payload)
        if not validation.valid:
            raise InvalidPayloadError(validation.message or "Invalid payload")

        new_task = Task(
            id=None,  # Will be set by repository
            owner=payload[TaskFields.OWNER],
            name=payload[TaskFields.NAME],
            description=payload.get(TaskFields.DESCRIPTION),
            category=payload[TaskFields.CATEGORY],
        )
        saved_task = await self.task_repository.save(new_task)

        logger.info(f"Created task {saved_task.id} for owner {saved_task.owner}")
        return MessageResponse(message="New task created!")
