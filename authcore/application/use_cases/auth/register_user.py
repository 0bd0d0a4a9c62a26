"""Register user use case."""

import asyncio
import logging
from uuid import uuid4

from authcore.application.dto.auth_dto import (
    AuthOutput,
    RegisterUserInput,
    UserProfileOutput,
)
from authcore.application.exceptions import (
    EmailAlreadyRegisteredError,
    EmailInvalidError,
    PasswordTooWeakError,
    ValidationError,
)
from authcore.application.ports.outbound.password_hasher_port import PasswordHasherPort
from authcore.application.ports.outbound.token_issuer_port import TokenIssuerPort
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.services.refresh_sessions import RefreshSessions
from authcore.application.use_cases.auth._tokens import issue_token_pair
from authcore.domain.entities.user import User
from authcore.domain.exceptions import (
    InvalidDisplayNameError,
    InvalidEmailError,
    InvalidPasswordError,
)
from authcore.domain.services.user_validation_service import UserValidationService
from authcore.domain.value_objects.password_hash import PasswordHash


logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user."""

    def __init__(
        self,
        uow: UnitOfWorkPort,
        password_hasher: PasswordHasherPort,
        token_issuer: TokenIssuerPort,
        sessions: RefreshSessions,
        default_role_name: str | None = None,
    ):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            password_hasher: Password hasher adapter
            token_issuer: Token issuer adapter
            sessions: Refresh session bookkeeping
            default_role_name: Role assigned to new users, if it exists
        """
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer
        self.sessions = sessions
        self.default_role_name = default_role_name

    async def execute(self, input_dto: RegisterUserInput) -> AuthOutput:
        """
        Register a new user account and open a session for it.

        Validation and the uniqueness check happen before any side effect.
        The user row is committed before tokens are issued; a failure
        after that point leaves a user that can simply log in.

        Args:
            input_dto: User registration data

        Returns:
            Credential pair and created user profile

        Raises:
            EmailInvalidError: If the email fails either validation gate
            PasswordTooWeakError: If the password is shorter than 8 characters
            ValidationError: If the display name is invalid
            EmailAlreadyRegisteredError: If a live user has this email
            StoreError: If the identity or session store fails
        """
        try:
            email = UserValidationService.validate_email(input_dto.email)
        except InvalidEmailError as e:
            raise EmailInvalidError() from e

        try:
            UserValidationService.validate_password_strength(input_dto.password)
        except InvalidPasswordError as e:
            raise PasswordTooWeakError() from e

        try:
            name = UserValidationService.validate_name(input_dto.name)
        except InvalidDisplayNameError as e:
            raise ValidationError(e.message, field="name") from e

        async with self.uow:
            if await self.uow.users.exists_by_email(email):
                logger.info("Registration rejected: email already registered")
                raise EmailAlreadyRegisteredError()

            hashed_password = await asyncio.to_thread(
                self.password_hasher.hash, input_dto.password
            )

            user = User(
                id=uuid4(),
                email=email,
                password_hash=PasswordHash(hashed_password),
                name=name,
                is_active=True,
            )

            # The unique index is the authoritative guard; the adapter maps
            # a violation to EmailAlreadyRegisteredError.
            created_user = await self.uow.users.add(user)
            await self._assign_default_role(created_user)

            await self.uow.commit()

        tokens = issue_token_pair(self.token_issuer, created_user)
        await self.sessions.register(tokens.refresh_token, created_user.id)

        logger.info("User registered: %s", created_user.id)

        return AuthOutput(tokens=tokens, user=UserProfileOutput.from_entity(created_user))

    async def _assign_default_role(self, user: User) -> None:
        if not self.default_role_name:
            return

        role = await self.uow.roles.get_by_name(self.default_role_name)
        if role is None:
            logger.warning(
                "Default role %r does not exist; user %s has no roles",
                self.default_role_name,
                user.id,
            )
            return

        await self.uow.roles.assign_to_user(user.id, role.id)
