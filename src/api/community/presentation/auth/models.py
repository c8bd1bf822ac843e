"""Pydantic models for registration and login."""

from __future__ import annotations

from pydantic import BaseModel, Field

from community.presentation.users.models import UserResponse


class RegisterRequest(BaseModel):
    """Request model for registering a new account."""

    login: str = Field(..., max_length=100, description="Desired login")
    password: str = Field(..., description="Plaintext password")
    name: str = Field(..., max_length=255, description="Display name")
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    timezone: str | None = Field(default=None, max_length=64)


class LoginRequest(BaseModel):
    """Request model for exchanging credentials for an access token."""

    login: str
    password: str


class TokenResponse(BaseModel):
    """Response model carrying a bearer access token."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse
