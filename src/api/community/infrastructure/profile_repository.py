"""SQLAlchemy implementation of IProfileRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.aggregates import Profile
from community.domain.value_objects import ProfileId, UserId
from community.infrastructure.models import ProfileModel
from community.ports.repositories import IProfileRepository


class ProfileRepository(IProfileRepository):
    """Relational repository for user profiles."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, profile: Profile) -> None:
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            model.name = profile.name
            model.bio = profile.bio
            model.photo_url = profile.photo_url
        else:
            self._session.add(
                ProfileModel(
                    id=profile.id.value,
                    user_id=profile.user_id.value,
                    name=profile.name,
                    bio=profile.bio,
                    photo_url=profile.photo_url,
                )
            )
        await self._session.flush()

    async def get_by_user_id(self, user_id: UserId) -> Profile | None:
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return Profile(
            id=ProfileId(value=model.id),
            user_id=UserId(value=model.user_id),
            name=model.name,
            bio=model.bio,
            photo_url=model.photo_url,
        )
