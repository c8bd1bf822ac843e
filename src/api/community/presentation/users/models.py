"""Pydantic models for account and profile requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from community.domain.aggregates import Profile, User
from community.domain.value_objects import AccountStatus, AuthorizationLevel


class UserResponse(BaseModel):
    """Response model for a user account. Never includes the credential."""

    id: str = Field(..., description="User ID (ULID format)")
    login: str = Field(..., description="Case-normalized login")
    name: str = Field(..., description="Display name")
    email: str | None = Field(default=None, description="Email address")
    phone: str | None = Field(default=None, description="Phone number")
    timezone: str | None = Field(default=None, description="Timezone name")
    authorization: AuthorizationLevel = Field(..., description="System-wide level")
    status: AccountStatus = Field(..., description="Account status")
    is_mentor: bool = Field(..., description="Whether the user may offer mentorships")

    @classmethod
    def from_domain(cls, user: User) -> UserResponse:
        """Convert domain User aggregate to API response."""
        return cls(
            id=user.id.value,
            login=user.login,
            name=user.name,
            email=user.email,
            phone=user.phone,
            timezone=user.timezone,
            authorization=user.authorization,
            status=user.status,
            is_mentor=user.is_mentor,
        )


class UpdateAccountRequest(BaseModel):
    """Request model for editing one's own account. Blank fields are ignored."""

    name: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)


class ProfileResponse(BaseModel):
    """Response model for a user profile."""

    id: str
    user_id: str
    name: str
    bio: str | None = None
    photo_url: str | None = None

    @classmethod
    def from_domain(cls, profile: Profile) -> ProfileResponse:
        return cls(
            id=profile.id.value,
            user_id=profile.user_id.value,
            name=profile.name,
            bio=profile.bio,
            photo_url=profile.photo_url,
        )


class UpdateProfileRequest(BaseModel):
    """Request model for editing one's own profile."""

    name: str | None = Field(default=None, max_length=255)
    bio: str | None = Field(default=None, max_length=2000)
    photo_url: str | None = Field(default=None, max_length=2048)
