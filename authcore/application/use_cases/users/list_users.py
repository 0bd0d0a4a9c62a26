"""List users use case."""

from authcore.application.dto.auth_dto import UserProfileOutput
from authcore.application.dto.user_dto import UserListOutput
from authcore.application.ports.outbound.unit_of_work_port import UnitOfWorkPort


class ListUsersUseCase:
    """
    Use case for paging through live users.

    Callers gate it behind the admin role; it performs no authorization
    itself.
    """

    def __init__(self, uow: UnitOfWorkPort):
        self.uow = uow

    async def execute(self, limit: int = 10, offset: int = 0) -> UserListOutput:
        async with self.uow:
            users = await self.uow.users.list_all(skip=offset, limit=limit)
            total = await self.uow.users.count()

        return UserListOutput(
            users=[UserProfileOutput.from_entity(user) for user in users],
            total=total,
            limit=limit,
            offset=offset,
        )
