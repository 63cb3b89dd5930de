"""Request-scoped dependencies for the userhub routers.

Available as Annotated aliases:
- DBSession: one AsyncSession per request
- RepoFactory: repositories bound to that session
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from userhub.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Open a session for the current request.

    Sessions come from the session maker created by ``create_app``.
    Anything not committed by the endpoint is rolled back when the session
    closes.

    Yields
    ------
    AsyncSession, closed when the response is sent
    """
    async with request.app.state.session_maker() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Get the repository factory bound to the request's session."""
    return SQLAlchemyRepositoryFactory(session=session)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
