"""Login user use case."""

import asyncio
import logging

from authcore.application.dto.auth_dto import AuthOutput, LoginInput, UserProfileOutput
from authcore.application.exceptions import (
    AccountDisabledError,
    ApplicationError,
    CredentialError,
    PasswordMismatchError,
)
from authcore.application.ports.outbound.password_hasher_port import PasswordHasherPort
from authcore.application.ports.outbound.token_issuer_port import TokenIssuerPort
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.services.refresh_sessions import RefreshSessions
from authcore.application.use_cases.auth._tokens import issue_token_pair
from authcore.domain.entities.user import User
from authcore.domain.exceptions import InvalidEmailError
from authcore.domain.value_objects.email import Email
from authcore.domain.value_objects.password_hash import PasswordHash


logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user with email and password."""

    def __init__(
        self,
        uow: UnitOfWorkPort,
        password_hasher: PasswordHasherPort,
        token_issuer: TokenIssuerPort,
        sessions: RefreshSessions,
    ):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            password_hasher: Password hasher adapter
            token_issuer: Token issuer adapter
            sessions: Refresh session bookkeeping
        """
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.sessions = sessions

    async def execute(self, input_dto: LoginInput) -> AuthOutput:
        """
        Authenticate user and issue a credential pair.

        Unknown email and wrong password raise the same CredentialError
        with the same message; only the logged reason differs.

        Args:
            input_dto: Login credentials

        Returns:
            Credential pair and user profile

        Raises:
            CredentialError: If credentials are invalid
            AccountDisabledError: If the password is right but the account is disabled
            PasswordVerificationError: If the stored hash cannot be checked
            StoreError: If the identity or session store fails
        """
        async with self.uow:
            user = await self._find_user(input_dto.email)

            try:
                await asyncio.to_thread(
                    self.password_hasher.verify,
                    user.password_hash.value,
                    input_dto.password,
                )
            except PasswordMismatchError:
                logger.warning("Login failed for user %s: password mismatch", user.id)
                raise CredentialError(reason="password_mismatch")

            if not user.is_active:
                logger.warning("Login refused for disabled user %s", user.id)
                raise AccountDisabledError()

        tokens = issue_token_pair(self.token_issuer, user)
        await self.sessions.register(tokens.refresh_token, user.id)

        await self._record_login(user, input_dto.password)

        logger.info("User logged in: %s", user.id)

        return AuthOutput(tokens=tokens, user=UserProfileOutput.from_entity(user))

    async def _find_user(self, raw_email: str) -> User:
        try:
            email = Email(raw_email)
        except InvalidEmailError:
            logger.warning("Login failed: malformed email")
            raise CredentialError(reason="user_not_found")

        user = await self.uow.users.get_by_email(email)
        if user is None:
            logger.warning("Login failed: no user for email")
            raise CredentialError(reason="user_not_found")
        return user

    async def _record_login(self, user: User, password: str) -> None:
        """
        Update last-login time, upgrading the hash if parameters changed.

        Best effort: the session is already registered, so an application error
        here, such as the user being deleted meanwhile, is logged and the
        login still succeeds.
        """
        user.record_login()
        try:
            if self.password_hasher.needs_rehash(user.password_hash.value):
                new_hash = await asyncio.to_thread(self.password_hasher.hash, password)
                user.change_password(PasswordHash(new_hash))
            async with self.uow:
                user = await self.uow.users.update(user)
                await self.uow.commit()
        except ApplicationError as e:
            logger.warning("Could not record login for user %s: %s", user.id, e)
