# Standard library imports
from typing import Any, Dict, List, Type, TypeVar, Union

# External package imports
from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel

# Local application imports
from ...application.dto.message_dto import ErrorResponse, MessageResponse
from ...application.dto.task_dto import (
    DeleteTaskRequest,
    SearchTasksRequest,
    TaskListResponse,
    UpdateTaskRequest,
)
from ...application.use_cases.task import (
    ListTasksUseCase,
    SearchTasksUseCase,
    AddTaskUseCase,
    DeleteTaskUseCase,
    UpdateTaskUseCase,
)
from ...di.base_container import BaseContainer
from ...di.container import get_container


RequestT = TypeVar("RequestT", bound=BaseModel)

router = APIRouter(tags=["tasks"])


def _body_as(request_class: Type[RequestT], payload: Any) -> RequestT:
    """Read a JSON body into a request DTO; anything but an object reads as empty"""
    if isinstance(payload, dict):
        return request_class.model_validate(payload)
    return request_class()


@router.get("", response_model=TaskListResponse, response_model_exclude_none=True)
async def get_all_tasks(
    container: BaseContainer = Depends(get_container),
) -> TaskListResponse:
    """
    List every task

    Returns:
        TaskListResponse with the tasks and their total
    """
    list_use_case = container.get(ListTasksUseCase)
    return await list_use_case.execute()


@router.post("/searchTasks", response_model=None)
async def search_tasks(
    payload: Any = Body(None),
    container: BaseContainer = Depends(get_container),
) -> Union[List[Dict[str, Any]], Dict[str, Any]]:
    """
    Search tasks by owner, name and category

    Args:
        payload: Optional criteria and ``operator`` ("or" or AND by default);
            a missing or non-object body searches with no criteria

    Returns:
        Matching task records, or a "No tasks found." message
    """
    search_use_case = container.get(SearchTasksUseCase)
    result = await search_use_case.execute(_body_as(SearchTasksRequest, payload))

    if isinstance(result, MessageResponse):
        return result.model_dump()
    return [task.to_record() for task in result]


@router.post(
    "/addTask",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def add_task(
    payload: Any = Body(None),
    container: BaseContainer = Depends(get_container),
) -> MessageResponse:
    """
    Create a task

    Args:
        payload: Body with owner, name, description and category

    Returns:
        MessageResponse confirming creation
    """
    add_use_case = container.get(AddTaskUseCase)
    return await add_use_case.execute(payload)


@router.delete(
    "/deleteTask",
    response_model=MessageResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_task(
    payload: Any = Body(None),
    container: BaseContainer = Depends(get_container),
) -> MessageResponse:
    """
    Delete a task owned by ``userId``

    Args:
        payload: Body with id and userId

    Returns:
        MessageResponse confirming deletion
    """
    delete_use_case = container.get(DeleteTaskUseCase)
    return await delete_use_case.execute(_body_as(DeleteTaskRequest, payload))


@router.put(
    "/updateTask",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_task(
    payload: Any = Body(None),
    container: BaseContainer = Depends(get_container),
) -> MessageResponse:
    """
    Update category, name or description of a task owned by ``userId``

    Args:
        payload: Body with id, userId and the fields to change

    Returns:
        MessageResponse confirming the update
    """
    update_use_case = container.get(UpdateTaskUseCase)
    return await update_use_case.execute(_body_as(UpdateTaskRequest, payload))
