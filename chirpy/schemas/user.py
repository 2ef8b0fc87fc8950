"""User and login schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """User registration request."""

    email: str = Field(..., max_length=255)
    password: str


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field(..., max_length=255)
    password: str


class UserResponse(BaseModel):
    """User information response. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str
