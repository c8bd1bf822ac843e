"""Content application service: posts and comments inside groups."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from community.application.authorization import check_role, require_role
from community.application.observability import (
    ContentServiceProbe,
    DefaultContentServiceProbe,
)
from community.application.value_objects import CurrentUser
from community.domain.aggregates import Comment, Membership, Post, validate_content
from community.domain.value_objects import (
    CommentId,
    GroupId,
    GroupRole,
    MembershipId,
    PostId,
)
from community.ports.exceptions import (
    CommentNotFoundError,
    GroupNotFoundError,
    PostNotFoundError,
)
from community.ports.repositories import (
    ICommentRepository,
    IGroupRepository,
    IMembershipRepository,
    IPostRepository,
)
from shared_kernel.exceptions import PermissionDeniedError


class ContentService:
    """Application service for posts and comments.

    Authorship is a Membership, so every write first resolves the actor's
    membership in the group that owns the content.
    """

    def __init__(
        self,
        session: AsyncSession,
        group_repository: IGroupRepository,
        membership_repository: IMembershipRepository,
        post_repository: IPostRepository,
        comment_repository: ICommentRepository,
        post_max_length: int = 1000,
        comment_max_length: int = 500,
        feed_size: int = 10,
        probe: ContentServiceProbe | None = None,
    ):
        self._session = session
        self._group_repository = group_repository
        self._membership_repository = membership_repository
        self._post_repository = post_repository
        self._comment_repository = comment_repository
        self._post_max_length = post_max_length
        self._comment_max_length = comment_max_length
        self._feed_size = feed_size
        self._probe = probe or DefaultContentServiceProbe()

    async def _get_post(self, post_id: PostId) -> Post:
        post = await self._post_repository.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(f"Post {post_id} not found")
        return post

    async def _get_comment(self, comment_id: CommentId) -> Comment:
        comment = await self._comment_repository.get_by_id(comment_id)
        if comment is None:
            raise CommentNotFoundError(f"Comment {comment_id} not found")
        return comment

    async def _membership_in(
        self, actor: CurrentUser, group_id: GroupId
    ) -> Membership | None:
        return await self._membership_repository.get_for_user_in_group(
            user_id=actor.user_id, group_id=group_id
        )

    def _require_author_or_moderator(
        self,
        membership: Membership | None,
        author_id: MembershipId,
        resource_id: str,
        actor: CurrentUser,
        operation: str,
    ) -> None:
        """Allow the author, or a MODERATOR/OWNER of the group."""
        membership = check_role(membership, GroupRole.STANDARD)
        if membership.id == author_id or membership.can_moderate():
            return
        self._probe.permission_denied(
            resource_id=resource_id, user_id=actor.user_id.value, operation=operation
        )
        raise PermissionDeniedError(f"only the author or a moderator can {operation}")

    def _require_author(
        self,
        membership: Membership | None,
        author_id: MembershipId,
        resource_id: str,
        actor: CurrentUser,
        operation: str,
    ) -> None:
        if membership is not None and membership.id == author_id:
            return
        self._probe.permission_denied(
            resource_id=resource_id, user_id=actor.user_id.value, operation=operation
        )
        raise PermissionDeniedError(f"only the author can {operation}")

    async def create_post(
        self, group_id: GroupId, content: str, author: CurrentUser
    ) -> Post:
        """Publish a post in a group.

        Raises:
            GroupNotFoundError: If the group does not exist
            NotAMemberError: If the author is not a member of the group
            MembershipRestrictedError: If the author is suspended or banned
            EmptyContentError: If the content is blank
            ContentTooLongError: If the content exceeds the post limit
        """
        async with self._session.begin():
            if await self._group_repository.get_by_id(group_id) is None:
                raise GroupNotFoundError(f"Group {group_id} not found")
            membership = await require_role(
                self._membership_repository, author.user_id, group_id, GroupRole.STANDARD
            )
            text = validate_content(content, self._post_max_length, "post")

            post = Post.create(group_id=group_id, author_id=membership.id, content=text)
            await self._post_repository.save(post)

        self._probe.post_created(
            post_id=post.id.value,
            group_id=group_id.value,
            author_id=membership.id.value,
        )
        return post

    async def edit_post(
        self, post_id: PostId, new_content: str, author: CurrentUser
    ) -> Post:
        """Replace the content of one's own post.

        Raises:
            PostNotFoundError: If the post does not exist
            PermissionDeniedError: If the actor did not write the post
            EmptyContentError: If the new content is blank
        """
        async with self._session.begin():
            post = await self._get_post(post_id)
            membership = await self._membership_in(author, post.group_id)
            self._require_author(
                membership, post.author_id, post_id.value, author, "edit this post"
            )
            check_role(membership, GroupRole.STANDARD)
            post.edit(validate_content(new_content, self._post_max_length, "post"))
            await self._post_repository.save(post)

        self._probe.post_edited(post_id=post_id.value, author_id=membership.id.value)
        return post

    async def delete_post(self, post_id: PostId, requester: CurrentUser) -> None:
        """Delete a post and its comments.

        Allowed for the post's author or a MODERATOR/OWNER of its group.

        Raises:
            PostNotFoundError: If the post does not exist
            NotAMemberError: If the requester is not a member of the group
            PermissionDeniedError: If the requester is neither the author nor
                a moderator
        """
        async with self._session.begin():
            post = await self._get_post(post_id)
            membership = await self._membership_in(requester, post.group_id)
            self._require_author_or_moderator(
                membership, post.author_id, post_id.value, requester, "delete this post"
            )
            comments = await self._comment_repository.delete_by_post(post_id)
            await self._post_repository.delete(post)

        self._probe.post_deleted(
            post_id=post_id.value,
            requester_id=requester.user_id.value,
            comments=comments,
        )

    async def list_posts_by_group(self, group_id: GroupId) -> list[Post]:
        """List a group's posts, newest first.

        Raises:
            GroupNotFoundError: If the group does not exist
        """
        async with self._session.begin():
            if await self._group_repository.get_by_id(group_id) is None:
                raise GroupNotFoundError(f"Group {group_id} not found")
            return await self._post_repository.list_by_group(group_id)

    async def feed_for_user(self, user: CurrentUser) -> list[Post]:
        """The latest posts across every group the user belongs to."""
        async with self._session.begin():
            memberships = await self._membership_repository.list_by_user(user.user_id)
            if not memberships:
                return []
            return await self._post_repository.list_latest_in_groups(
                [m.group_id for m in memberships], limit=self._feed_size
            )

    async def create_comment(
        self, post_id: PostId, content: str, author: CurrentUser
    ) -> Comment:
        """Comment on a post. The author must be a member of the post's group.

        Raises:
            PostNotFoundError: If the post does not exist
            NotAMemberError: If the author is not a member of the group
            EmptyContentError: If the content is blank
            ContentTooLongError: If the content exceeds the comment limit
        """
        async with self._session.begin():
            post = await self._get_post(post_id)
            membership = await require_role(
                self._membership_repository,
                author.user_id,
                post.group_id,
                GroupRole.STANDARD,
            )
            text = validate_content(content, self._comment_max_length, "comment")

            comment = Comment.create(
                post_id=post_id, author_id=membership.id, content=text
            )
            await self._comment_repository.save(comment)

        self._probe.comment_created(
            comment_id=comment.id.value,
            post_id=post_id.value,
            author_id=membership.id.value,
        )
        return comment

    async def edit_comment(
        self, comment_id: CommentId, new_content: str, author: CurrentUser
    ) -> Comment:
        """Replace the content of one's own comment."""
        async with self._session.begin():
            comment = await self._get_comment(comment_id)
            post = await self._get_post(comment.post_id)
            membership = await self._membership_in(author, post.group_id)
            self._require_author(
                membership,
                comment.author_id,
                comment_id.value,
                author,
                "edit this comment",
            )
            check_role(membership, GroupRole.STANDARD)
            comment.edit(
                validate_content(new_content, self._comment_max_length, "comment")
            )
            await self._comment_repository.save(comment)

        self._probe.comment_edited(
            comment_id=comment_id.value, author_id=membership.id.value
        )
        return comment

    async def delete_comment(
        self, comment_id: CommentId, requester: CurrentUser
    ) -> None:
        """Delete a comment (its author or a MODERATOR/OWNER of the group)."""
        async with self._session.begin():
            comment = await self._get_comment(comment_id)
            post = await self._get_post(comment.post_id)
            membership = await self._membership_in(requester, post.group_id)
            self._require_author_or_moderator(
                membership,
                comment.author_id,
                comment_id.value,
                requester,
                "delete this comment",
            )
            await self._comment_repository.delete(comment)

        self._probe.comment_deleted(
            comment_id=comment_id.value, requester_id=requester.user_id.value
        )

    async def list_comments_by_post(self, post_id: PostId) -> list[Comment]:
        """List a post's comments, oldest first.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        async with self._session.begin():
            await self._get_post(post_id)
            return await self._comment_repository.list_by_post(post_id)

    async def authors_of(
        self, author_ids: list[MembershipId]
    ) -> dict[MembershipId, Membership]:
        """Resolve membership ids to memberships, for display."""
        if not author_ids:
            return {}
        async with self._session.begin():
            memberships = await self._membership_repository.get_many(
                list(dict.fromkeys(author_ids))
            )
        return {m.id: m for m in memberships}
