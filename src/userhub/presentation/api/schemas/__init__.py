from userhub.presentation.api.schemas.common import ErrorResponse, HealthResponse
from userhub.presentation.api.schemas.users import UserRequest, UserResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "UserRequest",
    "UserResponse",
]
