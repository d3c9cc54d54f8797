# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ...dto.task_dto import TaskListResponse, TaskResponse


class ListTasksUseCase:
    """Use case for listing every task"""

    def __init__(self, task_repository: TaskRepository) -> None:
        self.task_repository = task_repository

    async def execute(self) -> TaskListResponse:
        """
        List all tasks, unfiltered

        Returns:
            TaskListResponse with the tasks and their count
        """
        tasks = await self.task_repository.find_all()
        return TaskListResponse(
            tasks=[TaskResponse.from_task(task) for task in tasks],
            total=len(tasks),
        )
