"""Unit tests for RegisterUserUseCase."""

from unittest.mock import AsyncMock, Mock

import pytest

from authcore.application.dto.auth_dto import RegisterUserInput
from authcore.application.dto.token_dto import TokenType
from authcore.application.exceptions import (
    EmailAlreadyRegisteredError,
    EmailInvalidError,
    PasswordTooWeakError,
    StoreError,
    ValidationError,
)
from authcore.application.use_cases.auth.register_user import RegisterUserUseCase


@pytest.fixture
def mock_uow():
    """Create a mock Unit of Work."""
    uow = Mock()
    uow.users = Mock()
    uow.roles = Mock()
    uow.commit = AsyncMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)  # Don't suppress exceptions
    return uow


@pytest.fixture
def register_input():
    """Create sample registration input."""
    return RegisterUserInput(
        email="new@example.com",
        password="SecurePass123",
        name="New User",
    )


@pytest.fixture
def use_case(uow, password_hasher, token_issuer, sessions):
    return RegisterUserUseCase(uow, password_hasher, token_issuer, sessions, default_role_name="user")


class TestRegisterUserUseCase:
    """Test RegisterUserUseCase."""

    @pytest.mark.asyncio
    async def test_register_user_success(self, use_case, register_input, uow, token_issuer, sessions):
        """Test successful registration returns a live credential pair."""
        # Act
        result = await use_case.execute(register_input)

        # Assert
        assert result.user.email == "new@example.com"
        assert result.user.name == "New User"
        assert result.user.is_active is True
        assert result.tokens.token_type == "bearer"
        assert result.tokens.expires_in == 900
        assert uow.commits == 1

        access = token_issuer.validate(result.tokens.access_token, TokenType.ACCESS)
        assert access.user_id == result.user.id
        assert access.email == "new@example.com"
        assert await sessions.lookup(result.tokens.refresh_token) == str(result.user.id)

    @pytest.mark.asyncio
    async def test_password_is_hashed(self, use_case, register_input, identity_db, password_hasher):
        result = await use_case.execute(register_input)

        stored = identity_db.users[result.user.id]
        assert stored.password_hash.value != "SecurePass123"
        password_hasher.verify(stored.password_hash.value, "SecurePass123")

    @pytest.mark.asyncio
    async def test_email_case_preserved(self, use_case):
        result = await use_case.execute(
            RegisterUserInput(email="Mixed@Example.com", password="SecurePass123", name="Mixed")
        )
        assert result.user.email == "Mixed@Example.com"

    @pytest.mark.asyncio
    async def test_default_role_assigned(self, use_case, register_input, uow, seeded_roles):
        result = await use_case.execute(register_input)

        roles = await uow.users.get_user_roles(result.user.id)
        assert [r.name for r in roles] == ["user"]

    @pytest.mark.asyncio
    async def test_missing_default_role_is_skipped(self, use_case, register_input, uow):
        """Test registration succeeds with no roles when the default role does not exist."""
        result = await use_case.execute(register_input)

        assert await uow.users.get_user_roles(result.user.id) == []

    @pytest.mark.asyncio
    async def test_duplicate_email(self, use_case, register_input, make_user, sessions, session_store):
        # Arrange
        make_user(email="new@example.com")

        # Act & Assert
        with pytest.raises(EmailAlreadyRegisteredError) as exc_info:
            await use_case.execute(register_input)

        assert exc_info.value.error_code == "EMAIL_ALREADY_REGISTERED"
        assert len(session_store) == 0

    @pytest.mark.asyncio
    async def test_email_uniqueness_is_case_sensitive(self, use_case, make_user):
        make_user(email="new@example.com")

        result = await use_case.execute(
            RegisterUserInput(email="NEW@example.com", password="SecurePass123", name="Other")
        )
        assert result.user.email == "NEW@example.com"

    @pytest.mark.asyncio
    async def test_invalid_email(self, use_case, uow):
        with pytest.raises(EmailInvalidError) as exc_info:
            await use_case.execute(
                RegisterUserInput(email="not-an-email", password="SecurePass123", name="X")
            )

        assert exc_info.value.error_code == "EMAIL_INVALID"
        assert uow.db.users == {}

    @pytest.mark.asyncio
    async def test_email_checked_before_password(self, use_case):
        """Test the first violated rule is the one reported."""
        with pytest.raises(EmailInvalidError):
            await use_case.execute(RegisterUserInput(email="bad", password="short", name="X"))

    @pytest.mark.asyncio
    async def test_weak_password(self, use_case, uow):
        with pytest.raises(PasswordTooWeakError) as exc_info:
            await use_case.execute(
                RegisterUserInput(email="new@example.com", password="1234567", name="X")
            )

        assert exc_info.value.details["field"] == "password"
        assert uow.db.users == {}

    @pytest.mark.asyncio
    async def test_blank_name(self, use_case):
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                RegisterUserInput(email="new@example.com", password="SecurePass123", name="   ")
            )

        assert exc_info.value.details["field"] == "name"

    @pytest.mark.asyncio
    async def test_duplicate_checked_before_hashing(
        self, mock_uow, register_input, token_issuer, sessions
    ):
        """Test nothing is hashed or added when the email is taken."""
        # Arrange
        mock_uow.users.exists_by_email = AsyncMock(return_value=True)
        mock_uow.users.add = AsyncMock()
        hasher = Mock()
        use_case = RegisterUserUseCase(mock_uow, hasher, token_issuer, sessions)

        # Act
        with pytest.raises(EmailAlreadyRegisteredError):
            await use_case.execute(register_input)

        # Assert
        hasher.hash.assert_not_called()
        mock_uow.users.add.assert_not_called()
        mock_uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, mock_uow, register_input, password_hasher, token_issuer, sessions):
        mock_uow.users.exists_by_email = AsyncMock(side_effect=StoreError(store="postgresql"))
        use_case = RegisterUserUseCase(mock_uow, password_hasher, token_issuer, sessions)

        with pytest.raises(StoreError):
            await use_case.execute(register_input)
