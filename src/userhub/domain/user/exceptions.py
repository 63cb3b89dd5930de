"""User domain exceptions.

The closed set of failures with business meaning for user accounts. Each
carries a stable message and error code; callers branch on the type.
"""

from typing import Optional

from userhub.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: Optional[int] = None, email: Optional[str] = None):
        self.user_id = user_id
        self.email = email
        details = {}
        if user_id is not None:
            details["user_id"] = user_id
        if email is not None:
            details["email"] = email
        super().__init__("user not found", ErrorCode.USER_NOT_FOUND, details)


class InvalidEmailError(ValidationError):
    """
    Raised when a user's email is unusable.

    Only emptiness is checked in the domain. Syntactic validation belongs
    to the request schema.
    """

    def __init__(self) -> None:
        super().__init__("invalid email", ErrorCode.INVALID_EMAIL)


class PasswordTooShortError(ValidationError):
    """Password shorter than the minimum length."""

    def __init__(self, min_length: int = 8) -> None:
        super().__init__(
            f"password must be at least {min_length} characters",
            ErrorCode.PASSWORD_TOO_SHORT,
            {"min_length": min_length},
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "email already exists",
            ErrorCode.DUPLICATE_EMAIL,
            {"email": email},
        )
