"""User self-service and administration use cases."""

from authcore.application.use_cases.users.delete_user import DeleteUserUseCase
from authcore.application.use_cases.users.list_users import ListUsersUseCase
from authcore.application.use_cases.users.update_user_profile import UpdateUserProfileUseCase

__all__ = [
    "DeleteUserUseCase",
    "ListUsersUseCase",
    "UpdateUserProfileUseCase",
]
