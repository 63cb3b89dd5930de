"""SQLAlchemy models for persistence layer."""

from userhub.infrastructure.persistence.sqlalchemy.models.base import Base
from userhub.infrastructure.persistence.sqlalchemy.models.user import UserModel

__all__ = [
    "Base",
    "UserModel",
]
