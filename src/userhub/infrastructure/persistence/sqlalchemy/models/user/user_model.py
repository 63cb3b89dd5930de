"""SQLAlchemy model for User aggregate."""

from sqlalchemy import BigInteger, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from userhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting User aggregates.

    - id is a 64-bit autoincrement integer assigned on insert
    - email is unique (storage-level guard behind the registration check)
    - password is stored as provided

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = (Index("ix_users_created_at", "created_at"),)

    id: Mapped[int] = mapped_column(
        # SQLite only autoincrements an INTEGER PRIMARY KEY (rowid alias)
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
