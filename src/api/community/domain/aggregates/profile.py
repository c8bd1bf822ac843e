"""Profile: the public, display-oriented extension of a User."""

from __future__ import annotations

from dataclasses import dataclass

from community.domain.value_objects import ProfileId, UserId


@dataclass
class Profile:
    """One-to-one extension of a User with display overrides."""

    id: ProfileId
    user_id: UserId
    name: str
    bio: str | None = None
    photo_url: str | None = None

    @classmethod
    def for_user(cls, user_id: UserId, name: str) -> Profile:
        """Create the profile that accompanies a new registration."""
        return cls(id=ProfileId.generate(), user_id=user_id, name=name)

    def edit(
        self,
        name: str | None = None,
        bio: str | None = None,
        photo_url: str | None = None,
    ) -> None:
        """Apply display overrides; None leaves a field unchanged."""
        if name is not None and name.strip():
            self.name = name.strip()
        if bio is not None:
            self.bio = bio.strip() or None
        if photo_url is not None:
            self.photo_url = photo_url.strip() or None
