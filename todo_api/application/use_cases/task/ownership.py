# Standard library imports
import logging
from typing import Any

# Local application imports
from ....domain.repositories.task_repository import TaskRepository
from ....domain.models.task import Task
from ....domain.exceptions import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


async def load_owned_task(task_repository: TaskRepository, task_id: Any, user_id: Any) -> Task:
    """
    Fetch a task and check that ``user_id`` owns it

    The user ID is taken from the request as-is; it is compared to the stored
    owner by exact equality.

    Raises:
        NotFoundError: If no task has this ID
        ForbiddenError: If the stored owner differs from ``user_id``
    """
    task = None
    if isinstance(task_id, str):
        task = await task_repository.find_by_id(task_id)

    if task is None:
        raise NotFoundError("Task not found")

    if task.owner != user_id:
        logger.warning(f"User {user_id} attempted to modify task {task.id} owned by {task.owner}")
        raise ForbiddenError("You are not the owner of this task")

    return task
