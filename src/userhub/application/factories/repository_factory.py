"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from userhub.domain.user.repositories import UserRepository


class RepositoryFactory(Protocol):
    """Hands out repositories that share one unit of work."""

    @property
    def session(self) -> Any:
        """The underlying session; the HTTP layer commits or rolls it back."""
        ...

    def user_repository(self) -> UserRepository:
        ...
