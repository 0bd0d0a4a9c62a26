"""Authentication use cases."""

from authcore.application.use_cases.auth.authenticate_token import AuthenticateTokenUseCase
from authcore.application.use_cases.auth.login_user import LoginUserUseCase
from authcore.application.use_cases.auth.logout_user import LogoutUserUseCase
from authcore.application.use_cases.auth.refresh_token import RefreshTokenUseCase
from authcore.application.use_cases.auth.register_user import RegisterUserUseCase

__all__ = [
    "AuthenticateTokenUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RefreshTokenUseCase",
    "RegisterUserUseCase",
]
