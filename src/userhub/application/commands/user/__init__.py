"""User commands - account registration, update and deletion."""

from userhub.application.commands.user.delete_user_command import (
    DeleteUserCommand,
)
from userhub.application.commands.user.register_user_command import (
    RegisterUserCommand,
)
from userhub.application.commands.user.update_user_command import (
    UpdateUserCommand,
)

__all__ = [
    "DeleteUserCommand",
    "RegisterUserCommand",
    "UpdateUserCommand",
]
