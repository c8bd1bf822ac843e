"""Post and Comment: group-scoped user content.

Authorship is recorded as a Membership, not a User, so content always belongs
to the author's presence in one specific group.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from community.domain.exceptions import ContentTooLongError, EmptyContentError
from community.domain.value_objects import CommentId, GroupId, MembershipId, PostId


def validate_content(content: str | None, max_length: int, kind: str) -> str:
    """Return trimmed content or raise if it is blank or too long.

    Args:
        content: Raw text submitted by the user
        max_length: Maximum number of characters allowed
        kind: "post" or "comment", used in error messages

    Raises:
        EmptyContentError: If content is None or blank after trimming
        ContentTooLongError: If content exceeds max_length
    """
    cleaned = (content or "").strip()
    if not cleaned:
        raise EmptyContentError(f"The {kind} content cannot be empty")
    if len(cleaned) > max_length:
        raise ContentTooLongError(
            f"The {kind} content cannot exceed {max_length} characters"
        )
    return cleaned


@dataclass
class Post:
    """A post inside a group, authored by one membership."""

    id: PostId
    group_id: GroupId
    author_id: MembershipId
    content: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    edited_at: datetime | None = None

    @classmethod
    def create(
        cls, group_id: GroupId, author_id: MembershipId, content: str
    ) -> Post:
        """Factory for a new post. Content must already be validated."""
        return cls(
            id=PostId.generate(),
            group_id=group_id,
            author_id=author_id,
            content=content,
        )

    def edit(self, content: str) -> None:
        """Replace the content. Content must already be validated."""
        self.content = content
        self.edited_at = datetime.now(UTC)


@dataclass
class Comment:
    """A comment on a post, authored by a membership in the post's group."""

    id: CommentId
    post_id: PostId
    author_id: MembershipId
    content: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    edited_at: datetime | None = None

    @classmethod
    def create(
        cls, post_id: PostId, author_id: MembershipId, content: str
    ) -> Comment:
        """Factory for a new comment. Content must already be validated."""
        return cls(
            id=CommentId.generate(),
            post_id=post_id,
            author_id=author_id,
            content=content,
        )

    def edit(self, content: str) -> None:
        """Replace the content. Content must already be validated."""
        self.content = content
        self.edited_at = datetime.now(UTC)
