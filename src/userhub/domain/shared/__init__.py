"""Shared domain components.

This module exports the exception hierarchy and time helpers used across
domain boundaries.
"""

from userhub.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from userhub.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
