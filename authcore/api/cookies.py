"""
Refresh token cookie.

Login and registration hand the refresh token out both in the body and
in an httpOnly cookie. Refresh and logout read the cookie first and fall
back to the JSON body.
"""

from typing import Optional

from fastapi import Request, Response

from authcore.infrastructure.config.settings import Settings


def read_refresh_cookie(request: Request, settings: Settings) -> Optional[str]:
    return request.cookies.get(settings.refresh_cookie_name) or None


def set_refresh_cookie(response: Response, refresh_token: str, settings: Settings) -> None:
    """Store the refresh token in a cookie living as long as the token itself."""
    response.set_cookie(
        key=settings.refresh_cookie_name,
        value=refresh_token,
        max_age=int(settings.refresh_token_ttl.total_seconds()),
        path="/",
        secure=settings.secure_cookies,
        httponly=True,
        samesite="lax",
    )


def clear_refresh_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.refresh_cookie_name,
        path="/",
        secure=settings.secure_cookies,
        httponly=True,
        samesite="lax",
    )


def presented_refresh_token(
    request: Request, settings: Settings, body_token: Optional[str] = None
) -> Optional[str]:
    """The refresh token of the request: the cookie wins over the body."""
    return read_refresh_cookie(request, settings) or body_token
