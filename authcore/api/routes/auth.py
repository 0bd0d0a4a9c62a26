"""
Authentication API routes.

- User registration
- User login
- Token refresh
- User logout
- Current principal

Refresh and logout take the refresh token from the httpOnly cookie
first and from the JSON body otherwise.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Request, Response, status

from authcore.api.cookies import (
    clear_refresh_cookie,
    presented_refresh_token,
    set_refresh_cookie,
)
from authcore.api.dependencies import (
    AppSettings,
    CurrentPrincipal,
    get_login_use_case,
    get_logout_use_case,
    get_refresh_use_case,
    get_register_use_case,
)
from authcore.application.dto.auth_dto import (
    AuthOutput,
    LoginInput,
    LogoutInput,
    PrincipalOutput,
    RefreshTokenInput,
    RegisterUserInput,
    UserProfileOutput,
)
from authcore.application.exceptions import ValidationError
from authcore.application.use_cases.auth import (
    LoginUserUseCase,
    LogoutUserUseCase,
    RefreshTokenUseCase,
    RegisterUserUseCase,
)
from authcore.domain.services.permission_resolver import PermissionResolver


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=AuthOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: RegisterUserInput,
    response: Response,
    settings: AppSettings,
    use_case: Annotated[RegisterUserUseCase, Depends(get_register_use_case)],
) -> AuthOutput:
    """
    Register a new account and open a session.

    Raises:
        400: Invalid email, weak password or invalid name
        409: Email already registered
    """
    result = await use_case.execute(body)
    set_refresh_cookie(response, result.tokens.refresh_token, settings)
    return result


@router.post("/login", response_model=AuthOutput, summary="Log in with email and password")
async def login(
    body: LoginInput,
    response: Response,
    settings: AppSettings,
    use_case: Annotated[LoginUserUseCase, Depends(get_login_use_case)],
) -> AuthOutput:
    """
    Raises:
        401: Invalid email or password
        403: Account is disabled
    """
    result = await use_case.execute(body)
    set_refresh_cookie(response, result.tokens.refresh_token, settings)
    return result


@router.post("/refresh", response_model=AuthOutput, summary="Rotate a refresh token")
async def refresh(
    request: Request,
    response: Response,
    settings: AppSettings,
    use_case: Annotated[RefreshTokenUseCase, Depends(get_refresh_use_case)],
    body: Optional[RefreshTokenInput] = None,
) -> AuthOutput:
    """
    Exchange a live refresh token for a new pair. The old token stops working.

    Raises:
        400: No refresh token in the cookie or the body
        401: Token is invalid
        404: No live session for this token
    """
    refresh_token = presented_refresh_token(
        request, settings, body.refresh_token if body else None
    )
    if not refresh_token:
        raise ValidationError(
            "Refresh token is required", field="refresh_token", constraint="required"
        )

    result = await use_case.execute(RefreshTokenInput(refresh_token=refresh_token))
    set_refresh_cookie(response, result.tokens.refresh_token, settings)
    return result


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT, summary="End a session")
async def logout(
    request: Request,
    settings: AppSettings,
    use_case: Annotated[LogoutUserUseCase, Depends(get_logout_use_case)],
    body: Optional[LogoutInput] = None,
) -> Response:
    """Revoke a refresh token and clear the cookie. Always succeeds, even for unknown tokens."""
    refresh_token = presented_refresh_token(
        request, settings, body.refresh_token if body else None
    )
    if refresh_token:
        await use_case.execute(LogoutInput(refresh_token=refresh_token))

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_refresh_cookie(response, settings)
    return response


@router.get("/me", response_model=PrincipalOutput, summary="Current principal")
async def me(principal: CurrentPrincipal) -> PrincipalOutput:
    effective = PermissionResolver.effective_permissions(principal.roles)
    return PrincipalOutput(
        user=UserProfileOutput.from_entity(principal.user),
        roles=principal.role_names,
        permissions=sorted(effective.permissions),
    )
