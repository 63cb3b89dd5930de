"""SQLAlchemy repository implementations."""

from userhub.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from userhub.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    # Factory (recommended for creating repositories)
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
