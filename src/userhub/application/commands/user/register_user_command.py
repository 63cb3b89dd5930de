"""Register a new user account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from userhub.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)

if TYPE_CHECKING:
    from userhub.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class RegisterUserCommand:
    """
    Create a user after validating it and checking the email is free.

    The uniqueness check is a read before the write and is not atomic.
    Two concurrent registrations of the same email can both pass it; the
    storage unique constraint then rejects the second insert.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RegisterUserCommand:
        return cls(user_repository=factory.user_repository())

    async def execute(self, email: str, name: str, password: str) -> User:
        user = User.create(email=email, name=name, password=password)
        user.validate()

        try:
            await self._user_repo.get_by_email(user.email)
        except UserNotFoundError:
            pass
        else:
            logger.info("Registration rejected, email in use: %s", user.email)
            raise EmailAlreadyExistsError(user.email)

        # TODO: hash the password before storing once credential handling lands
        await self._user_repo.create(user)
        logger.debug("Registered user %s (email: %s)", user.id, user.email)
        return user
