# Standard library imports
from typing import List, Union

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.models.task_filter import TaskFilter
from ...dto.message_dto import MessageResponse
from ...dto.task_dto import SearchTasksRequest, TaskResponse


NO_TASKS_FOUND_MESSAGE = "No tasks found."


class SearchTasksUseCase:
    """Use case for searching tasks by owner, name and category"""

    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository

    async def execute(
        self,
        request: SearchTasksRequest,
    ) -> Union[List[TaskResponse], MessageResponse]:
        """
        Search tasks

        Present fields are combined with OR when ``operator`` is "or",
        otherwise with AND. No present fields matches every task.

        Args:
            request: Search criteria

        Returns:
            Matching tasks, or a "No tasks found." message when nothing matches
        """
        task_filter = TaskFilter.build(
            owner=request.owner,
            name=request.name,
            category=request.category,
            operator=request.operator,
        )
        tasks = await self.task_repository.find(task_filter)

        if not tasks:
            return MessageResponse(message=NO_TASKS_FOUND_MESSAGE)

        return [TaskResponse.from_task(task) for task in tasks]
