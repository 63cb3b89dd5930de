"""SQLAlchemy repository implementations for user domain."""

from userhub.infrastructure.persistence.sqlalchemy.repositories.user.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = ["UserRepositorySQLAlchemy"]
