"""SQLAlchemy repository factory for creating request-scoped repositories."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from userhub.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo
