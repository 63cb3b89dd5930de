"""User domain - manages user accounts.

This domain handles:
- User aggregate (identity, credentials, timestamps)
- Business-rule validation (non-empty email, minimum password length)
- The user error taxonomy

Design notes:
- User ID is an integer assigned by storage on creation
- Email uniqueness is checked by the application layer before insert;
  the storage unique constraint is the safety net
- Repository interface defined here, implementation in infrastructure
"""

from userhub.domain.user.aggregates import MIN_PASSWORD_LENGTH, User
from userhub.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    PasswordTooShortError,
    UserNotFoundError,
)
from userhub.domain.user.repositories import UserRepository

__all__ = [
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "MIN_PASSWORD_LENGTH",
    "PasswordTooShortError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
