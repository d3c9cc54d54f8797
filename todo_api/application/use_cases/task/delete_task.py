# Standard library imports
import logging

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ...dto.message_dto import MessageResponse
from ...dto.task_dto import DeleteTaskRequest
from .ownership import load_owned_task

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    """Use case for deleting a task owned by the caller"""

    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository

    async def execute(self, request: DeleteTaskRequest) -> MessageResponse:
        """
        Delete a task

        Args:
            request: Task ID and the ID of the requesting user

        Returns:
            MessageResponse confirming deletion

        Raises:
            NotFoundError: If no task has this ID
            ForbiddenError: If the requesting user does not own the task
            StoreError: If the store fails
        """
        task = await load_owned_task(self.task_repository, request.id, request.user_id)

        await self.task_repository.delete(task.id or "")

        logger.info(f"Deleted task {task.id}")
        return MessageResponse(message="Task deleted successfully!")
