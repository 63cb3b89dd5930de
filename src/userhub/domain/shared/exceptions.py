"""Error taxonomy shared by all userhub domain code.

Every failure with business meaning derives from DomainException. The
three category classes (validation, not found, conflict) decide the
default error code; concrete errors in each bounded context pick a more
specific one. The HTTP layer maps codes to status codes in one place.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Machine-readable codes returned to API clients.

    Clients branch on these values, so existing members are never renamed.
    """

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EMAIL = "INVALID_EMAIL"
    PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # 409
    CONFLICT = "CONFLICT"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"

    # 500
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Root of the domain error hierarchy.

    Attributes
    ----------
    message
        Text shown to API clients; never contains storage details
    code
        Stable ErrorCode, defaults to the category's ``default_code``
    details
        Extra context for logs only
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        name = type(self).__name__
        return (
            f"{name}(message={self.message!r}, "
            f"code={self.code.value!r}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input rejected by a domain rule."""

    default_code = ErrorCode.VALIDATION_ERROR


class EntityNotFoundError(DomainException):
    """Lookup by key matched nothing."""

    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """Write would violate a uniqueness or state rule."""

    default_code = ErrorCode.CONFLICT
