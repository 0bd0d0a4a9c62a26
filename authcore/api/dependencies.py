"""
FastAPI dependencies for authentication and authorization.

This module provides:
- Per-request wiring of the use cases from ``app.state``
- Current principal extraction from the bearer access token
- Permission and role gates
"""

import logging
from collections.abc import AsyncGenerator, Callable
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from authcore.application.dto.auth_dto import AuthenticatedPrincipal
from authcore.application.exceptions import CredentialError, TokenError
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.application.services.refresh_sessions import RefreshSessions, SessionKeyBuilder
from authcore.application.use_cases.auth import (
    AuthenticateTokenUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RefreshTokenUseCase,
    RegisterUserUseCase,
)
from authcore.application.use_cases.users import (
    DeleteUserUseCase,
    ListUsersUseCase,
    UpdateUserProfileUseCase,
)
from authcore.domain.services.permission_resolver import PermissionResolver
from authcore.infrastructure.adapters.outbound.persistence.postgresql.unit_of_work import (
    PostgresUnitOfWork,
)
from authcore.infrastructure.config.settings import Settings


logger = logging.getLogger(__name__)

# Security scheme for the OpenAPI docs
security = HTTPBearer(
    scheme_name="Bearer",
    description="JWT access token",
    auto_error=False,
)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_uow(request: Request) -> AsyncGenerator[UnitOfWorkPort, None]:
    """
    Yield a Unit of Work bound to a fresh database session.

    Tests override this dependency with an in-memory double.
    """
    async with request.app.state.db_config.get_session() as session:
        yield PostgresUnitOfWork(session)


def get_sessions(request: Request) -> RefreshSessions:
    settings: Settings = request.app.state.settings
    return RefreshSessions(
        store=request.app.state.session_store,
        keys=SessionKeyBuilder(settings.session_key_prefix),
        ttl_seconds=request.app.state.token_issuer.refresh_ttl_seconds,
    )


AppSettings = Annotated[Settings, Depends(get_app_settings)]
UoW = Annotated[UnitOfWorkPort, Depends(get_uow)]
Sessions = Annotated[RefreshSessions, Depends(get_sessions)]


def get_register_use_case(request: Request, uow: UoW, sessions: Sessions) -> RegisterUserUseCase:
    return RegisterUserUseCase(
        uow,
        request.app.state.password_hasher,
        request.app.state.token_issuer,
        sessions,
        default_role_name=request.app.state.settings.default_role_name,
    )


def get_login_use_case(request: Request, uow: UoW, sessions: Sessions) -> LoginUserUseCase:
    return LoginUserUseCase(
        uow,
        request.app.state.password_hasher,
        request.app.state.token_issuer,
        sessions,
    )


def get_refresh_use_case(request: Request, uow: UoW, sessions: Sessions) -> RefreshTokenUseCase:
    return RefreshTokenUseCase(uow, request.app.state.token_issuer, sessions)


def get_logout_use_case(sessions: Sessions) -> LogoutUserUseCase:
    return LogoutUserUseCase(sessions)


def get_authenticate_use_case(request: Request, uow: UoW) -> AuthenticateTokenUseCase:
    return AuthenticateTokenUseCase(uow, request.app.state.token_issuer)


def get_update_profile_use_case(uow: UoW) -> UpdateUserProfileUseCase:
    return UpdateUserProfileUseCase(uow)


def get_delete_user_use_case(uow: UoW, sessions: Sessions) -> DeleteUserUseCase:
    return DeleteUserUseCase(uow, sessions)


def get_list_users_use_case(uow: UoW) -> ListUsersUseCase:
    return ListUsersUseCase(uow)


async def get_current_principal(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    use_case: Annotated[AuthenticateTokenUseCase, Depends(get_authenticate_use_case)],
) -> AuthenticatedPrincipal:
    """
    Resolve the bearer access token to a principal.

    The principal is also stored in ``request.state.principal`` for
    downstream handlers.

    Raises:
        CredentialError: If the Authorization header is missing
        TokenError: If the token is invalid, expired or not an access token
        AccountDisabledError: If the user is disabled
    """
    if credentials is None:
        logger.warning("Authentication failed: missing bearer token")
        raise CredentialError("Missing authentication credentials", reason="missing_token")

    principal = await use_case.execute(credentials.credentials)
    request.state.principal = principal
    return principal


async def get_optional_principal(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    use_case: Annotated[AuthenticateTokenUseCase, Depends(get_authenticate_use_case)],
) -> Optional[AuthenticatedPrincipal]:
    """Like get_current_principal, but anonymous when no valid token is presented."""
    if credentials is None:
        return None
    try:
        principal = await use_case.execute(credentials.credentials)
    except (CredentialError, TokenError) as e:
        logger.info("Ignoring invalid optional credentials: %s", e.error_code)
        return None
    request.state.principal = principal
    return principal


CurrentPrincipal = Annotated[AuthenticatedPrincipal, Depends(get_current_principal)]
OptionalPrincipal = Annotated[Optional[AuthenticatedPrincipal], Depends(get_optional_principal)]


def require_permissions(*permissions: str) -> Callable:
    """
    Dependency factory requiring every listed permission.

    Usage:
        @router.post("/workflows", dependencies=[Depends(require_permissions("workflow:write"))])
    """

    async def dependency(principal: CurrentPrincipal) -> AuthenticatedPrincipal:
        PermissionResolver.check_permissions(str(principal.user_id), principal.roles, *permissions)
        return principal

    return dependency


def require_any_role(*names: str) -> Callable:
    """Dependency factory requiring at least one of the roles (case-insensitive)."""

    async def dependency(principal: CurrentPrincipal) -> AuthenticatedPrincipal:
        PermissionResolver.check_any_role(str(principal.user_id), principal.roles, *names)
        return principal

    return dependency


def require_all_roles(*names: str) -> Callable:
    """Dependency factory requiring every listed role (case-insensitive)."""

    async def dependency(principal: CurrentPrincipal) -> AuthenticatedPrincipal:
        PermissionResolver.check_all_roles(str(principal.user_id), principal.roles, *names)
        return principal

    return dependency
