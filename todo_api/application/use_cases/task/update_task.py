# Standard library imports
import logging
from dataclasses import replace

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.exceptions import InvalidPayloadError
from ...dto.message_dto import MessageResponse
from ...dto.task_dto import UpdateTaskRequest
from ...validation import validate_task_payload
from .ownership import load_owned_task

logger = logging.getLogger(__name__)


class UpdateTaskUseCase:
    """Use case for partially updating a task owned by the caller"""

    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository

    async def execute(self, request: UpdateTaskRequest) -> MessageResponse:
        """
        Update a task

        Each supplied field (category, name, description) overwrites the
        stored value; the others are kept. The owner never changes. The
        merged task must still pass the task schema, otherwise nothing is
        written.

        Args:
            request: Task ID, requesting user ID and the fields to change

        Returns:
            MessageResponse confirming the update

        Raises:
            NotFoundError: If no task has this ID
            ForbiddenError: If the requesting user does not own the task
            InvalidPayloadError: If the merged task fails the task schema
            StoreError: If the store fails
        """
        task = await load_owned_task(self.task_repository, request.id, request.user_id)

        merged_task = replace(
            task,
            category=request.category or task.category,
            name=request.name or task.name,
            description=request.description or task.description,
        )

        validation = validate_task_payload(merged_task.to_payload())
        if not validation.valid:
            raise InvalidPayloadError(validation.message or "Invalid payload")

        await self.task_repository.save(merged_task)

        logger.info(f"Updated task {merged_task.id}")
        return MessageResponse(message="Task updated successfully!")
