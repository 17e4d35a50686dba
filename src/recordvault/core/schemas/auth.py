"""
Authentication and account schemas.

These schemas define the API contracts for registration, login, account
updates and the bearer token handed back to clients.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _normalize_email(v: str) -> str:
    """Emails compare case-insensitively."""
    if "@" not in v:
        raise ValueError("Invalid email address")
    return v.strip().lower()


def _check_username(v: str) -> str:
    if not v.replace("_", "").replace("-", "").isalnum():
        raise ValueError("Username can only contain letters, numbers, hyphens, and underscores")
    return v


class RegisterRequest(BaseModel):
    """User registration request schema."""

    email: str = Field(min_length=3, max_length=255, description="Email address")
    username: str = Field(min_length=3, max_length=50, description="Unique username")
    password: str = Field(min_length=8, max_length=128, description="User password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        return _check_username(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "miles@example.com",
                "username": "miles",
                "password": "securepassword123",
            }
        }
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    email: str = Field(min_length=3, max_length=255, description="Email address")
    password: str = Field(min_length=1, max_length=128, description="User password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower()


class TokenResponse(BaseModel):
    """JWT token response schema."""

    access_token: str = Field(description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user_id: int = Field(description="Authenticated user id")
    issued_at: datetime = Field(description="Issue timestamp")
    expires_at: datetime = Field(description="Expiry timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "user_id": 7,
                "issued_at": "2025-09-13T10:30:00Z",
                "expires_at": "2025-09-14T10:30:00Z",
            }
        }
    )


class UserResponse(BaseModel):
    """Public user profile."""

    id: int = Field(description="User identifier")
    email: str = Field(description="Email address")
    username: str = Field(description="Username")
    created_at: datetime = Field(description="Registration timestamp")

    model_config = ConfigDict(from_attributes=True)


class UserUpdateRequest(BaseModel):
    """New email and username for the current account."""

    email: str = Field(min_length=3, max_length=255, description="Email address")
    username: str = Field(min_length=3, max_length=50, description="Unique username")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        return _check_username(v)
