"""Query to list users page by page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from userhub.domain.user import User, UserRepository

if TYPE_CHECKING:
    from userhub.application.factories import RepositoryFactory


class ListUsersQuery:
    """List users newest first. Ordering is the repository's contract."""

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self, limit: int, offset: int) -> list[User]:
        return await self._user_repo.list(limit, offset)
