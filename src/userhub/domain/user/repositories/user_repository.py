"""User repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from userhub.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    All methods are coroutines. Cancelling the awaiting task, or running it
    under ``asyncio.timeout``, must abort the storage call.
    """

    @abstractmethod
    async def create(self, user: User) -> None:
        """
        Insert a new user.

        Assigns ``id``, ``created_at`` and ``updated_at`` on the given user.
        Both timestamps are equal after creation.

        Parameters
        ----------
        user
            The unsaved user

        Raises
        ------
        EmailAlreadyExistsError
            If the storage-level unique constraint on email is violated
        """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User:
        """
        Get a user by their ID.

        Raises
        ------
        UserNotFoundError
            If no user has this id
        """

    @abstractmethod
    async def get_by_email(self, email: str) -> User:
        """
        Get a user by their email address.

        Raises
        ------
        UserNotFoundError
            If no user has this email
        """

    @abstractmethod
    async def update(self, user: User) -> None:
        """
        Persist a user's fields by id and refresh ``updated_at``.

        Updating an id that does not exist affects nothing and is not an
        error.

        Raises
        ------
        EmailAlreadyExistsError
            If the new email is already used by another user
        """

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """
        Delete a user by ID.

        Deleting an id that does not exist is not an error.
        """

    @abstractmethod
    async def list(self, limit: int, offset: int) -> list[User]:
        """
        List users, newest created first.

        Parameters
        ----------
        limit
            Maximum number of users to return
        offset
            Number of users to skip
        """
