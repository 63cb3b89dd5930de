"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from userhub.domain.shared.time import ensure_tz_aware, utc_now
from userhub.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)
from userhub.infrastructure.persistence.sqlalchemy.models.user import UserModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    message = str(error.orig if error.orig is not None else error).lower()
    return "unique" in message or "duplicate key" in message


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Works inside the caller's session: writes are flushed, never committed.
    The presentation layer owns commit and rollback.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, user: User) -> None:
        now = utc_now()
        model = UserModel(
            email=user.email,
            name=user.name,
            password=user.password,
            created_at=now,
            updated_at=now,
        )
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        user.mark_persisted(model.id, now, now)
        logger.info("Created user: %s (email: %s)", model.id, model.email)

    async def get_by_id(self, user_id: int) -> User:
        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(user_id=user_id)
        return self._map_to_domain(model)

    async def get_by_email(self, email: str) -> User:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            raise UserNotFoundError(email=email)

        return self._map_to_domain(model)

    async def update(self, user: User) -> None:
        now = utc_now()
        model = await self._find_model_by_id(user.id) if user.is_persisted else None

        if model is None:
            # Nothing to update; mirrors an UPDATE that matches zero rows
            user.touch(now)
            logger.debug("Update skipped, no user with id %s", user.id)
            return

        model.email = user.email
        model.name = user.name
        model.password = user.password
        model.updated_at = now

        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        user.mark_persisted(model.id, ensure_tz_aware(model.created_at), now)
        logger.debug("Updated user: %s", user.id)

    async def delete(self, user_id: int) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", user_id)

    async def list(self, limit: int, offset: int) -> list[User]:
        stmt = (
            select(UserModel)
            .order_by(UserModel.created_at.desc(), UserModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def _find_model_by_id(self, user_id: int) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            name=model.name,
            password=model.password,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
