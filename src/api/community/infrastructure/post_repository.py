"""SQLAlchemy implementation of IPostRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.aggregates import Post
from community.domain.value_objects import GroupId, MembershipId, PostId
from community.infrastructure.models import PostModel
from community.ports.repositories import IPostRepository

_NO_SYNC = {"synchronize_session": False}


class PostRepository(IPostRepository):
    """Relational repository for posts."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, post: Post) -> None:
        stmt = select(PostModel).where(PostModel.id == post.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            model.content = post.content
            model.edited_at = post.edited_at
        else:
            self._session.add(
                PostModel(
                    id=post.id.value,
                    group_id=post.group_id.value,
                    author_id=post.author_id.value,
                    content=post.content,
                    created_at=post.created_at,
                    edited_at=post.edited_at,
                )
            )
        await self._session.flush()

    async def get_by_id(self, post_id: PostId) -> Post | None:
        stmt = select(PostModel).where(PostModel.id == post_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_by_group(self, group_id: GroupId) -> list[Post]:
        stmt = (
            select(PostModel)
            .where(PostModel.group_id == group_id.value)
            .order_by(PostModel.created_at.desc(), PostModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_latest_in_groups(
        self, group_ids: list[GroupId], limit: int
    ) -> list[Post]:
        stmt = (
            select(PostModel)
            .where(PostModel.group_id.in_([g.value for g in group_ids]))
            .order_by(PostModel.created_at.desc(), PostModel.id.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, post: Post) -> bool:
        stmt = delete(PostModel).where(PostModel.id == post.id.value)
        result = await self._session.execute(stmt, execution_options=_NO_SYNC)
        return result.rowcount > 0

    async def delete_by_author(self, author_id: MembershipId) -> int:
        stmt = delete(PostModel).where(PostModel.author_id == author_id.value)
        result = await self._session.execute(stmt, execution_options=_NO_SYNC)
        return result.rowcount

    async def delete_by_group(self, group_id: GroupId) -> int:
        stmt = delete(PostModel).where(PostModel.group_id == group_id.value)
        result = await self._session.execute(stmt, execution_options=_NO_SYNC)
        return result.rowcount

    @staticmethod
    def _to_domain(model: PostModel) -> Post:
        return Post(
            id=PostId(value=model.id),
            group_id=GroupId(value=model.group_id),
            author_id=MembershipId(value=model.author_id),
            content=model.content,
            created_at=model.created_at,
            edited_at=model.edited_at,
        )
