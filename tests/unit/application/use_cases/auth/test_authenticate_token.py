"""Unit tests for AuthenticateTokenUseCase."""

from uuid import uuid4

import pytest

from authcore.application.exceptions import (
    AccountDisabledError,
    CredentialError,
    MalformedTokenError,
    TokenError,
)
from authcore.application.use_cases.auth.authenticate_token import AuthenticateTokenUseCase


@pytest.fixture
def use_case(uow, token_issuer):
    return AuthenticateTokenUseCase(uow, token_issuer)


class TestAuthenticateTokenUseCase:
    """Test AuthenticateTokenUseCase."""

    @pytest.mark.asyncio
    async def test_principal_with_roles(self, use_case, token_issuer, make_user, make_role):
        # Arrange
        user = make_user()
        make_role("viewer", ["workflow:read"], user)
        make_role("admin", ["*"], user)
        token = token_issuer.issue_access_token(user.id, user.email.value)

        # Act
        principal = await use_case.execute(token)

        # Assert
        assert principal.user_id == user.id
        assert principal.role_names == ["admin", "viewer"]

    @pytest.mark.asyncio
    async def test_user_without_roles(self, use_case, token_issuer, make_user):
        user = make_user()

        principal = await use_case.execute(token_issuer.issue_access_token(user.id, user.email.value))

        assert principal.roles == []

    @pytest.mark.asyncio
    async def test_refresh_token_rejected(self, use_case, token_issuer, make_user):
        """Test a refresh token cannot be used as a bearer credential."""
        user = make_user()

        with pytest.raises(MalformedTokenError):
            await use_case.execute(token_issuer.issue_refresh_token(user.id))

    @pytest.mark.asyncio
    async def test_invalid_token(self, use_case):
        with pytest.raises(TokenError):
            await use_case.execute("not.a.token")

    @pytest.mark.asyncio
    async def test_unknown_user(self, use_case, token_issuer):
        with pytest.raises(CredentialError) as exc_info:
            await use_case.execute(token_issuer.issue_access_token(uuid4(), "ghost@example.com"))

        assert exc_info.value.reason == "user_not_found"

    @pytest.mark.asyncio
    async def test_deleted_user(self, use_case, token_issuer, make_user, identity_db):
        user = make_user()
        token = token_issuer.issue_access_token(user.id, user.email.value)
        identity_db.users[user.id].soft_delete()

        with pytest.raises(CredentialError):
            await use_case.execute(token)

    @pytest.mark.asyncio
    async def test_disabled_user(self, use_case, token_issuer, make_user):
        user = make_user(is_active=False)

        with pytest.raises(AccountDisabledError):
            await use_case.execute(token_issuer.issue_access_token(user.id, user.email.value))
