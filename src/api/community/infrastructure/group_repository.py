"""SQLAlchemy implementation of IGroupRepository.

Groups are loaded together with their current member count, which the
search ordering relies on.
"""

from __future__ import annotations

from sqlalchemy import Select, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.aggregates import Group
from community.domain.value_objects import GroupId, UserId
from community.infrastructure.models import GroupModel, MembershipModel
from community.ports.repositories import IGroupRepository

_NO_SYNC = {"synchronize_session": False}


class GroupRepository(IGroupRepository):
    """Relational repository for Group aggregates."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
        """
        self._session = session

    @staticmethod
    def _with_member_count() -> Select:
        member_count = (
            select(func.count(MembershipModel.id))
            .where(MembershipModel.group_id == GroupModel.id)
            .correlate(GroupModel)
            .scalar_subquery()
        )
        return select(GroupModel, member_count.label("member_count"))

    async def save(self, group: Group) -> None:
        stmt = select(GroupModel).where(GroupModel.id == group.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            model.name = group.name
            model.description = group.description
            model.active = group.active
        else:
            self._session.add(
                GroupModel(
                    id=group.id.value,
                    name=group.name,
                    description=group.description,
                    active=group.active,
                )
            )
        await self._session.flush()

    async def get_by_id(self, group_id: GroupId) -> Group | None:
        stmt = self._with_member_count().where(GroupModel.id == group_id.value)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return self._to_domain(row[0], row[1])

    async def list_for_user(self, user_id: UserId) -> list[Group]:
        mine = select(MembershipModel.group_id).where(
            MembershipModel.user_id == user_id.value
        )
        stmt = (
            self._with_member_count()
            .where(GroupModel.id.in_(mine))
            .order_by(GroupModel.name, GroupModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model, count) for model, count in result.all()]

    async def search(self, query: str) -> list[Group]:
        stmt = self._with_member_count()
        needle = query.strip().lower()
        if needle:
            stmt = stmt.where(
                or_(
                    func.lower(GroupModel.name).contains(needle, autoescape=True),
                    func.lower(GroupModel.description).contains(
                        needle, autoescape=True
                    ),
                )
            )
        result = await self._session.execute(stmt)
        return [self._to_domain(model, count) for model, count in result.all()]

    async def delete(self, group: Group) -> bool:
        stmt = delete(GroupModel).where(GroupModel.id == group.id.value)
        result = await self._session.execute(stmt, execution_options=_NO_SYNC)
        return result.rowcount > 0

    @staticmethod
    def _to_domain(model: GroupModel, member_count: int) -> Group:
        return Group(
            id=GroupId(value=model.id),
            name=model.name,
            description=model.description,
            active=model.active,
            member_count=member_count or 0,
        )
