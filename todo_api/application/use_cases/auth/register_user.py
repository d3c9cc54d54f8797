# Standard library imports
import logging
from typing import Any, Mapping

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ....domain.exceptions import ConflictError, InvalidPayloadError
from ....core.security import hash_password
from ...dto.message_dto import MessageResponse
from ...validation import validate_auth_payload

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, payload: Mapping[str, Any]) -> MessageResponse:
        """
        Register a new user

        Args:
            payload: Registration body with email and password

        Returns:
            MessageResponse confirming creation

        Raises:
            InvalidPayloadError: If the payload fails the auth schema
            ConflictError: If a user with this email already exists
            StoreError: If the store fails
        """
        validation = validate_auth_payload(payload)
        if not validation.valid:
            raise InvalidPayloadError(validation.message or "Invalid payload")

        email: str = payload[UserFields.EMAIL]

        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(email)
        if existing_user is not None:
            raise ConflictError("Email already exists")

        new_user = User(
            id=None,  # Will be set by repository
            email=email,
            hashed_password=hash_password(payload[UserFields.PASSWORD]),
        )
        saved_user = await self.user_repository.save(new_user)

        logger.info(f"Registered user {saved_user.id}")
        return MessageResponse(message="New user created!")
