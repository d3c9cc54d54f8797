"""
Unit tests for auth use cases (Register, Login).
"""
from unittest.mock import AsyncMock

import pytest
from todo_api.core.security import hash_password
from todo_api.application.use_cases.auth.login_user import LoginUserUseCase
from todo_api.application.use_cases.auth.register_user import RegisterUserUseCase
from todo_api.domain.exceptions import (
    ConflictError,
    InvalidPayloadError,
    StoreError,
    UnauthorizedError,
)
from todo_api.domain.models.user import User


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.save.side_effect = lambda user: User(
            id="usr-new", email=user.email, hashed_password=user.hashed_password
        )

        use_case = RegisterUserUseCase(mock_user_repo)
        result = await use_case.execute({"email": "new@todo.com", "password": "password123"})

        assert result.message == "New user created!"
        saved_user = mock_user_repo.save.call_args.args[0]
        assert saved_user.email == "new@todo.com"
        assert saved_user.hashed_password != "password123"
        assert saved_user.hashed_password.startswith("$2b$")

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = User(
            id="usr-1", email="existing@todo.com", hashed_password="hash"
        )

        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(ConflictError, match="Email already exists"):
            await use_case.execute({"email": "existing@todo.com", "password": "password123"})
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_invalid_payload_never_hits_store(self, mock_user_repo):
        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(InvalidPayloadError, match='"email" must be a valid email'):
            await use_case.execute({"email": "someone@todo.org", "password": "pw"})
        mock_user_repo.find_by_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_twice_created_then_conflict(self, user_repo, mock_settings):
        use_case = RegisterUserUseCase(user_repo)
        payload = {"email": "twice@todo.com", "password": "pw"}

        first = await use_case.execute(payload)
        assert first.message == "New user created!"
        with pytest.raises(ConflictError):
            await use_case.execute(payload)
        assert len(user_repo.users) == 1

    @pytest.mark.asyncio
    async def test_register_store_error_propagates(self, mock_user_repo):
        mock_user_repo.find_by_email.side_effect = StoreError("connection refused")
        use_case = RegisterUserUseCase(mock_user_repo)
        with pytest.raises(StoreError, match="connection refused"):
            await use_case.execute({"email": "new@todo.com", "password": "pw"})


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = User(
            id="usr-123", email="test@todo.com", hashed_password=hash_password("validpass123")
        )

        use_case = LoginUserUseCase(mock_user_repo)
        result = await use_case.execute({"email": "test@todo.com", "password": "validpass123"})
        assert result.message == "Login successful!"

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        use_case = LoginUserUseCase(mock_user_repo)
        with pytest.raises(UnauthorizedError, match="Invalid email or password"):
            await use_case.execute({"email": "unknown@todo.com", "password": "anypass123"})

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, mock_user_repo, mock_settings):
        mock_user_repo.find_by_email.return_value = User(
            id="usr-1", email="test@todo.com", hashed_password=hash_password("correctpass")
        )
        use_case = LoginUserUseCase(mock_user_repo)
        with pytest.raises(UnauthorizedError, match="Invalid email or password"):
            await use_case.execute({"email": "test@todo.com", "password": "wrongpassword"})

    @pytest.mark.asyncio
    async def test_login_invalid_payload(self, mock_user_repo):
        use_case = LoginUserUseCase(mock_user_repo)
        with pytest.raises(InvalidPayloadError, match='"password" is required'):
            await use_case.execute({"email": "test@todo.com"})

    @pytest.mark.asyncio
    async def test_register_then_login(self, user_repo, mock_settings):
        await RegisterUserUseCase(user_repo).execute({"email": "jane@todo.com", "password": "s3cret"})
        login = LoginUserUseCase(user_repo)

        assert (await login.execute({"email": "jane@todo.com", "password": "s3cret"})).message == "Login successful!"
        with pytest.raises(UnauthorizedError):
            await login.execute({"email": "jane@todo.com", "password": "s3cret!"})
        with pytest.raises(UnauthorizedError):
            await login.execute({"email": "john@todo.com", "password": "s3cret"})
