"""Engine, session factory and schema helpers."""

import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Import models to register with Base.metadata
import userhub.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from userhub.config import Settings
from userhub.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


def _is_in_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database.

    The engine owns the connection pool and is shared by all requests.
    In-memory SQLite gets a single shared connection, otherwise every
    session would see its own empty database.
    """
    url = settings.database_url
    if _is_in_memory_sqlite(url):
        return create_async_engine(
            url,
            echo=settings.database_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(
        url,
        echo=settings.database_echo,
        pool_pre_ping=True,  # Verify connections before use
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


def display_url(database_url: str) -> str:
    """Render a database URL without its password."""
    return make_url(database_url).render_as_string(hide_password=True)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")
