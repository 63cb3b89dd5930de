"""Command layer. Operations that change state."""

from userhub.application.commands.user import (
    DeleteUserCommand,
    RegisterUserCommand,
    UpdateUserCommand,
)

__all__ = [
    "DeleteUserCommand",
    "RegisterUserCommand",
    "UpdateUserCommand",
]
