"""Replace a user's email, name and password."""

from __future__ import annotations

from typing import TYPE_CHECKING

from userhub.domain.user import User, UserRepository

if TYPE_CHECKING:
    from userhub.application.factories import RepositoryFactory


class UpdateUserCommand:
    """Validate and persist new details for an existing user id.

    No existence check is made: updating an unknown id is left to the
    repository, which treats it as a no-op.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateUserCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(
        self,
        user_id: int,
        email: str,
        name: str,
        password: str,
    ) -> User:
        user = User(id=user_id, email=email, name=name, password=password)
        user.validate()
        await self._user_repo.update(user)
        return user
