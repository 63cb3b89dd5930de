"""Delete a user account."""

from __future__ import annotations

from typing import TYPE_CHECKING

from userhub.domain.user import UserRepository

if TYPE_CHECKING:
    from userhub.application.factories import RepositoryFactory


class DeleteUserCommand:
    """Delete a user by id. Unknown ids are not an error."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteUserCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: int) -> None:
        await self._user_repo.delete(user_id)
