"""User account endpoints."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Path, Query, status

from userhub.application.commands import (
    DeleteUserCommand,
    RegisterUserCommand,
    UpdateUserCommand,
)
from userhub.application.queries import GetUserQuery, ListUsersQuery
from userhub.presentation.api.dependencies import RepoFactory
from userhub.presentation.api.schemas import ErrorResponse, UserRequest, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0
MAX_LIMIT = 100

# Signed 64-bit, the range of the users.id column
USER_ID_MIN = -(2**63)
USER_ID_MAX = 2**63 - 1

UserId = Annotated[int, Path(ge=USER_ID_MIN, le=USER_ID_MAX)]


def _parse_int(raw: Optional[str], default: int) -> int:
    """Parse a query value, falling back to the default when unusable."""
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _pagination(raw_limit: Optional[str], raw_offset: Optional[str]) -> tuple[int, int]:
    limit = _parse_int(raw_limit, DEFAULT_LIMIT)
    offset = _parse_int(raw_offset, DEFAULT_OFFSET)
    if limit < 1:
        limit = DEFAULT_LIMIT
    limit = min(limit, MAX_LIMIT)
    offset = max(offset, 0)
    return limit, offset


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User created successfully"},
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def create_user(request: UserRequest, factory: RepoFactory) -> UserResponse:
    """Register a new user."""
    command = RegisterUserCommand.from_factory(factory)

    try:
        user = await command.execute(
            email=request.email,
            name=request.name,
            password=request.password,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}",
    summary="Get a user",
    responses={
        200: {"description": "The user"},
        400: {"model": ErrorResponse, "description": "Malformed user id"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def get_user(user_id: UserId, factory: RepoFactory) -> UserResponse:
    """Get a user by id."""
    query = GetUserQuery.from_factory(factory)
    user = await query.execute(user_id)
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    summary="Replace a user's details",
    responses={
        200: {"description": "User updated"},
        400: {"model": ErrorResponse, "description": "Malformed body or user id"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def update_user(
    user_id: UserId,
    request: UserRequest,
    factory: RepoFactory,
) -> UserResponse:
    """Replace email, name and password of a user."""
    command = UpdateUserCommand.from_factory(factory)

    try:
        user = await command.execute(
            user_id=user_id,
            email=request.email,
            name=request.name,
            password=request.password,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={
        204: {"description": "User deleted (or did not exist)"},
        400: {"model": ErrorResponse, "description": "Malformed user id"},
    },
)
async def delete_user(user_id: UserId, factory: RepoFactory) -> None:
    """Delete a user by id."""
    command = DeleteUserCommand.from_factory(factory)

    try:
        await command.execute(user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise


@router.get(
    "",
    summary="List users",
    responses={200: {"description": "Users, newest first"}},
)
async def list_users(
    factory: RepoFactory,
    limit: Optional[str] = Query(default=None, description="Page size (default 10)"),
    offset: Optional[str] = Query(default=None, description="Users to skip (default 0)"),
) -> list[UserResponse]:
    """List users, newest created first."""
    page_limit, page_offset = _pagination(limit, offset)
    query = ListUsersQuery.from_factory(factory)
    users = await query.execute(limit=page_limit, offset=page_offset)
    return [UserResponse.model_validate(u) for u in users]
