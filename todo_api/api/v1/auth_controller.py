# Standard library imports
from typing import Any

# External package imports
from fastapi import APIRouter, Body, Depends, status

# Local application imports
from ...application.dto.message_dto import ErrorResponse, MessageResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.base_container import BaseContainer
from ...di.container import get_container


router = APIRouter(tags=["authentication"])


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def register_user(
    payload: Any = Body(None),
    container: BaseContainer = Depends(get_container),
) -> MessageResponse:
    """
    Register a new user

    Args:
        payload: Body with email and password

    Returns:
        MessageResponse confirming creation
    """
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(payload)


@router.post(
    "/login",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def login_user(
    payload: Any = Body(None),
    container: BaseContainer = Depends(get_container),
) -> MessageResponse:
    """
    Check a user's credentials. No token or session is issued.

    Args:
        payload: Body with email and password

    Returns:
        MessageResponse confirming the login
    """
    login_use_case = container.get(LoginUserUseCase)
    return await login_use_case.execute(payload)
