"""SQLAlchemy implementation of IMembershipRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.aggregates import Membership
from community.domain.value_objects import (
    AccessStatus,
    GroupId,
    GroupRole,
    MembershipId,
    UserId,
)
from community.infrastructure.models import MembershipModel
from community.ports.exceptions import AlreadyMemberError
from community.ports.repositories import IMembershipRepository
from infrastructure.database import violates_unique_constraint

_NO_SYNC = {"synchronize_session": False}


class MembershipRepository(IMembershipRepository):
    """Relational repository for memberships."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, membership: Membership) -> None:
        """Persist a membership (create or update).

        Raises:
            AlreadyMemberError: If the (user, group) unique constraint fires
        """
        stmt = select(MembershipModel).where(MembershipModel.id == membership.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            model.role = membership.role.value
            model.status = membership.status.value
        else:
            self._session.add(
                MembershipModel(
                    id=membership.id.value,
                    group_id=membership.group_id.value,
                    user_id=membership.user_id.value,
                    tag=membership.tag,
                    name=membership.name,
                    role=membership.role.value,
                    status=membership.status.value,
                    joined_at=membership.joined_at,
                )
            )

        try:
            await self._session.flush()
        except IntegrityError as e:
            if violates_unique_constraint(
                e, "uq_memberships_user_group", "memberships.user_id"
            ):
                raise AlreadyMemberError(
                    f"User {membership.user_id} is already a member of group "
                    f"{membership.group_id}"
                ) from e
            raise

    async def get_by_id(self, membership_id: MembershipId) -> Membership | None:
        stmt = select(MembershipModel).where(MembershipModel.id == membership_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def get_for_user_in_group(
        self, user_id: UserId, group_id: GroupId
    ) -> Membership | None:
        stmt = select(MembershipModel).where(
            MembershipModel.user_id == user_id.value,
            MembershipModel.group_id == group_id.value,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def get_many(self, membership_ids: list[MembershipId]) -> list[Membership]:
        if not membership_ids:
            return []
        stmt = select(MembershipModel).where(
            MembershipModel.id.in_([m.value for m in membership_ids])
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_group(self, group_id: GroupId) -> list[Membership]:
        stmt = (
            select(MembershipModel)
            .where(MembershipModel.group_id == group_id.value)
            .order_by(MembershipModel.joined_at, MembershipModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_user(self, user_id: UserId) -> list[Membership]:
        stmt = select(MembershipModel).where(MembershipModel.user_id == user_id.value)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, membership: Membership) -> bool:
        stmt = delete(MembershipModel).where(MembershipModel.id == membership.id.value)
        result = await self._session.execute(stmt, execution_options=_NO_SYNC)
        return result.rowcount > 0

    async def delete_by_group(self, group_id: GroupId) -> int:
        stmt = delete(MembershipModel).where(MembershipModel.group_id == group_id.value)
        result = await self._session.execute(stmt, execution_options=_NO_SYNC)
        return result.rowcount

    @staticmethod
    def _to_domain(model: MembershipModel) -> Membership:
        return Membership(
            id=MembershipId(value=model.id),
            group_id=GroupId(value=model.group_id),
            user_id=UserId(value=model.user_id),
            tag=model.tag,
            name=model.name,
            role=GroupRole(model.role),
            status=AccessStatus(model.status),
            joined_at=model.joined_at,
        )
