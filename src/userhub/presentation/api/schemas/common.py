"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"error": "user not found", "code": "USER_NOT_FOUND"},
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
