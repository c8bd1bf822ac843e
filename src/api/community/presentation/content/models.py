"""Pydantic models for posts and comments."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from community.domain.aggregates import Comment, Membership, Post
from community.domain.value_objects import MembershipId


class ContentRequest(BaseModel):
    """Request model for creating or editing a post or comment."""

    content: str = Field(..., description="Text content")


class AuthorResponse(BaseModel):
    """The membership that authored a post or comment."""

    membership_id: str
    tag: str | None = None
    name: str | None = None

    @classmethod
    def for_author(
        cls, author_id: MembershipId, authors: dict[MembershipId, Membership]
    ) -> AuthorResponse:
        membership = authors.get(author_id)
        if membership is None:
            return cls(membership_id=author_id.value)
        return cls(membership_id=author_id.value, tag=membership.tag, name=membership.name)


class PostResponse(BaseModel):
    """Response model for a post."""

    id: str = Field(..., description="Post ID (ULID format)")
    group_id: str
    author: AuthorResponse
    content: str
    created_at: datetime
    edited_at: datetime | None = None

    @classmethod
    def from_domain(
        cls, post: Post, authors: dict[MembershipId, Membership] | None = None
    ) -> PostResponse:
        return cls(
            id=post.id.value,
            group_id=post.group_id.value,
            author=AuthorResponse.for_author(post.author_id, authors or {}),
            content=post.content,
            created_at=post.created_at,
            edited_at=post.edited_at,
        )


class CommentResponse(BaseModel):
    """Response model for a comment."""

    id: str = Field(..., description="Comment ID (ULID format)")
    post_id: str
    author: AuthorResponse
    content: str
    created_at: datetime
    edited_at: datetime | None = None

    @classmethod
    def from_domain(
        cls, comment: Comment, authors: dict[MembershipId, Membership] | None = None
    ) -> CommentResponse:
        return cls(
            id=comment.id.value,
            post_id=comment.post_id.value,
            author=AuthorResponse.for_author(comment.author_id, authors or {}),
            content=comment.content,
            created_at=comment.created_at,
            edited_at=comment.edited_at,
        )
