# Standard library imports
from typing import Any, Mapping

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.exceptions import InvalidPayloadError, UnauthorizedError
from ....core.security import verify_password
from ...dto.message_dto import MessageResponse
from ...validation import validate_auth_payload


INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class LoginUserUseCase:
    """Use case for checking a user's credentials (no session is created)"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, payload: Mapping[str, Any]) -> MessageResponse:
        """
        Check email and password against the stored hash

        Args:
            payload: Login body with email and password

        Returns:
            MessageResponse confirming the login

        Raises:
            InvalidPayloadError: If the payload fails the auth schema
            UnauthorizedError: If the email is unknown or the password is wrong
            StoreError: If the store fails
        """
        validation = validate_auth_payload(payload)
        if not validation.valid:
            raise InvalidPayloadError(validation.message or "Invalid payload")

        # Unknown email and wrong password are reported the same way
        user = await self.user_repository.find_by_email(payload[UserFields.EMAIL])
        if user is None:
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        if not verify_password(payload[UserFields.PASSWORD], user.hashed_password):
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        return MessageResponse(message="Login successful!")
