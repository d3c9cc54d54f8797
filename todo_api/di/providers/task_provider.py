from typing import TYPE_CHECKING
from ...domain.repositories.task_repository import TaskRepository
from ...application.use_cases.task import (
    ListTasksUseCase,
    SearchTasksUseCase,
    AddTaskUseCase,
    DeleteTaskUseCase,
    UpdateTaskUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class TaskProvider:
    """Task use case provider - registers all task-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all task use cases.
        Use cases are created on-demand via factories.
        """
        for use_case_class in (
            ListTasksUseCase,
            SearchTasksUseCase,
            AddTaskUseCase,
            DeleteTaskUseCase,
            UpdateTaskUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda use_case_class=use_case_class: use_case_class(
                    task_repository=container.get(TaskRepository)
                )
            )
