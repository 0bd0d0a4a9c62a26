"""
User API routes.

This module provides:
- GET /api/v1/users/me - Current user profile
- PUT /api/v1/users/me - Update current user profile
- DELETE /api/v1/users/me - Close the current account
- GET /api/v1/users - List users (admin only, paginated)
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from authcore.api.cookies import clear_refresh_cookie, presented_refresh_token
from authcore.api.dependencies import (
    AppSettings,
    CurrentPrincipal,
    get_delete_user_use_case,
    get_list_users_use_case,
    get_update_profile_use_case,
    require_any_role,
)
from authcore.application.dto.auth_dto import LogoutInput, UserProfileOutput
from authcore.application.dto.user_dto import UpdateUserProfileInput, UserListOutput
from authcore.application.use_cases.users import (
    DeleteUserUseCase,
    ListUsersUseCase,
    UpdateUserProfileUseCase,
)


router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/me", response_model=UserProfileOutput, summary="Get current user profile")
async def get_current_user_profile(principal: CurrentPrincipal) -> UserProfileOutput:
    return UserProfileOutput.from_entity(principal.user)


@router.put("/me", response_model=UserProfileOutput, summary="Update current user profile")
async def update_current_user_profile(
    body: UpdateUserProfileInput,
    principal: CurrentPrincipal,
    use_case: Annotated[UpdateUserProfileUseCase, Depends(get_update_profile_use_case)],
) -> UserProfileOutput:
    """
    Update display name and/or avatar URL. Omitted fields are left alone.

    Raises:
        400: Empty or too long display name
        401: Missing or invalid access token
    """
    return await use_case.execute(principal.user_id, body)


@router.delete(
    "/me",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete current user account",
)
async def delete_current_user(
    request: Request,
    principal: CurrentPrincipal,
    settings: AppSettings,
    use_case: Annotated[DeleteUserUseCase, Depends(get_delete_user_use_case)],
    body: Optional[LogoutInput] = None,
) -> Response:
    """
    Soft delete the account, revoke the presented refresh token and clear
    the refresh cookie.
    """
    refresh_token = presented_refresh_token(
        request, settings, body.refresh_token if body else None
    )
    await use_case.execute(principal.user_id, refresh_token)

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_refresh_cookie(response, settings)
    return response


@router.get(
    "",
    response_model=UserListOutput,
    summary="List users",
    dependencies=[Depends(require_any_role("admin"))],
)
async def list_users(
    use_case: Annotated[ListUsersUseCase, Depends(get_list_users_use_case)],
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> UserListOutput:
    """
    List live users, oldest first.

    Raises:
        401: Missing or invalid access token
        403: Caller does not hold the admin role
    """
    return await use_case.execute(limit=limit, offset=offset)
