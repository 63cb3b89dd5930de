"""Query to get a single user by id."""

from __future__ import annotations

from typing import TYPE_CHECKING

from userhub.domain.user import User, UserRepository

if TYPE_CHECKING:
    from userhub.application.factories import RepositoryFactory


class GetUserQuery:
    """Query to retrieve a user by id.

    Raises UserNotFoundError (from the repository) when the id is unknown.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self, user_id: int) -> User:
        return await self._user_repo.get_by_id(user_id)
