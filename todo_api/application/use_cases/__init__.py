from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
)
from .task import (
    ListTasksUseCase,
    SearchTasksUseCase,
    AddTaskUseCase,
    DeleteTaskUseCase,
    UpdateTaskUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "ListTasksUseCase",
    "SearchTasksUseCase",
    "AddTaskUseCase",
    "DeleteTaskUseCase",
    "UpdateTaskUseCase",
]
