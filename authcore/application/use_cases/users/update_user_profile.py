"""Update user profile use case."""

import logging
from uuid import UUID

from authcore.application.dto.auth_dto import UserProfileOutput
from authcore.application.dto.user_dto import UpdateUserProfileInput
from authcore.application.exceptions import NotFoundError, ValidationError
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from authcore.domain.exceptions import InvalidDisplayNameError


logger = logging.getLogger(__name__)


class UpdateUserProfileUseCase:
    """Use case for updating the display name and avatar of a user."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(
        self, user_id: UUID, input_dto: UpdateUserProfileInput
    ) -> UserProfileOutput:
        """
        Update user profile.

        Args:
            user_id: User's unique identifier
            input_dto: Profile update data

        Returns:
            Updated user profile

        Raises:
            NotFoundError: If user doesn't exist
            ValidationError: If the new display name is empty or too long
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError(
                    message="User not found",
                    resource_type="User",
                    resource_id=str(user_id),
                )

            try:
                user.update_profile(name=input_dto.name, avatar_url=input_dto.avatar_url)
            except InvalidDisplayNameError as e:
                raise ValidationError(e.message, field="name") from e

            updated_user = await self.uow.users.update(user)
            await self.uow.commit()

        logger.info("Profile updated for user %s", user_id)
        return UserProfileOutput.from_entity(updated_user)
