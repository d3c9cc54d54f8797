from .list_tasks import ListTasksUseCase
from .search_tasks import SearchTasksUseCase, NO_TASKS_FOUND_MESSAGE
from .add_task import AddTaskUseCase
from .delete_task import DeleteTaskUseCase
from .update_task import UpdateTaskUseCase

__all__ = [
    "ListTasksUseCase",
    "SearchTasksUseCase",
    "NO_TASKS_FOUND_MESSAGE",
    "AddTaskUseCase",
    "DeleteTaskUseCase",
    "UpdateTaskUseCase",
]
