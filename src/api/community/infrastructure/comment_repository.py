"""SQLAlchemy implementation of ICommentRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.aggregates import Comment
from community.domain.value_objects import CommentId, GroupId, MembershipId, PostId
from community.infrastructure.models import CommentModel, PostModel
from community.ports.repositories import ICommentRepository

_NO_SYNC = {"synchronize_session": False}


class CommentRepository(ICommentRepository):
    """Relational repository for comments."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, comment: Comment) -> None:
        stmt = select(CommentModel).where(CommentModel.id == comment.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            model.content = comment.content
            model.edited_at = comment.edited_at
        else:
            self._session.add(
                CommentModel(
                    id=comment.id.value,
                    post_id=comment.post_id.value,
                    author_id=comment.author_id.value,
                    content=comment.content,
                    created_at=comment.created_at,
                    edited_at=comment.edited_at,
                )
            )
        await self._session.flush()

    async def get_by_id(self, comment_id: CommentId) -> Comment | None:
        stmt = select(CommentModel).where(CommentModel.id == comment_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_by_post(self, post_id: PostId) -> list[Comment]:
        stmt = (
            select(CommentModel)
            .where(CommentModel.post_id == post_id.value)
            .order_by(CommentModel.created_at, CommentModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def delete(self, comment: Comment) -> bool:
        stmt = delete(CommentModel).where(CommentModel.id == comment.id.value)
        result = await self._session.execute(stmt, execution_options=_NO_SYNC)
        return result.rowcount > 0

    async def delete_by_post(self, post_id: PostId) -> int:
        stmt = delete(CommentModel).where(CommentModel.post_id == post_id.value)
        result = await self._session.execute(stmt, execution_options=_NO_SYNC)
        return result.rowcount

    async def delete_by_author(self, author_id: MembershipId) -> int:
        stmt = delete(CommentModel).where(CommentModel.author_id == author_id.value)
        result = await self._session.execute(stmt, execution_options=_NO_SYNC)
        return result.rowcount

    async def delete_on_posts_by_author(self, author_id: MembershipId) -> int:
        posts = select(PostModel.id).where(PostModel.author_id == author_id.value)
        stmt = delete(CommentModel).where(CommentModel.post_id.in_(posts))
        result = await self._session.execute(stmt, execution_options=_NO_SYNC)
        return result.rowcount

    async def delete_by_group(self, group_id: GroupId) -> int:
        posts = select(PostModel.id).where(PostModel.group_id == group_id.value)
        stmt = delete(CommentModel).where(CommentModel.post_id.in_(posts))
        result = await self._session.execute(stmt, execution_options=_NO_SYNC)
        return result.rowcount

    @staticmethod
    def _to_domain(model: CommentModel) -> Comment:
        return Comment(
            id=CommentId(value=model.id),
            post_id=PostId(value=model.post_id),
            author_id=MembershipId(value=model.author_id),
            content=model.content,
            created_at=model.created_at,
            edited_at=model.edited_at,
        )
