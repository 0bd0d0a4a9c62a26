"""Unit tests for DeleteUserUseCase."""

from uuid import uuid4

import pytest

from authcore.application.exceptions import NotFoundError
from authcore.application.use_cases.users import DeleteUserUseCase


@pytest.fixture
def use_case(uow, sessions):
    return DeleteUserUseCase(uow, sessions)


class TestDeleteUserUseCase:
    """Test DeleteUserUseCase."""

    @pytest.mark.asyncio
    async def test_soft_deletes_and_revokes_session(self, use_case, make_user, uow, identity_db, sessions, token_issuer):
        # Arrange
        user = make_user()
        refresh_token = token_issuer.issue_refresh_token(user.id)
        await sessions.register(refresh_token, user.id)

        # Act
        await use_case.execute(user.id, refresh_token)

        # Assert
        stored = identity_db.users[user.id]
        assert stored.is_deleted()
        assert stored.is_active is False
        assert await uow.users.get_by_id(user.id) is None
        assert await sessions.lookup(refresh_token) is None
        assert uow.commits == 1

    @pytest.mark.asyncio
    async def test_without_refresh_token(self, use_case, make_user, identity_db):
        user = make_user()

        await use_case.execute(user.id)

        assert identity_db.users[user.id].is_deleted()

    @pytest.mark.asyncio
    async def test_foreign_session_is_left_alone(self, use_case, make_user, sessions, token_issuer):
        """Test a refresh token bound to another user is not revoked."""
        alice = make_user()
        bob = make_user(email="bob@example.com", name="Bob")
        bobs_token = token_issuer.issue_refresh_token(bob.id)
        await sessions.register(bobs_token, bob.id)

        await use_case.execute(alice.id, bobs_token)

        assert await sessions.lookup(bobs_token) == str(bob.id)

    @pytest.mark.asyncio
    async def test_email_is_free_again(self, use_case, make_user, uow):
        user = make_user()

        await use_case.execute(user.id)

        assert await uow.users.exists_by_email(user.email) is False

    @pytest.mark.asyncio
    async def test_unknown_user(self, use_case):
        with pytest.raises(NotFoundError):
            await use_case.execute(uuid4())
