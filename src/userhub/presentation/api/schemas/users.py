"""User request/response schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRequest(BaseModel):
    """Request schema for creating or replacing a user."""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=8, max_length=255)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane@example.com",
                "name": "Jane Doe",
                "password": "correct-horse",
            },
        },
    )


class UserResponse(BaseModel):
    """Response schema for a user. The password is never included."""

    id: Optional[int]
    email: str
    name: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)
