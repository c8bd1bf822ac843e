"""HTTP routes for posts and comments."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from community.application.services import ContentService
from community.application.value_objects import CurrentUser
from community.dependencies.authentication import get_current_user
from community.dependencies.services import get_content_service
from community.domain.value_objects import CommentId, GroupId, PostId
from community.presentation.content.models import (
    CommentResponse,
    ContentRequest,
    PostResponse,
)
from shared_kernel.exceptions import DomainError
from shared_kernel.http_errors import parse_identifier, to_http_exception

router = APIRouter(tags=["content"])


@router.get("/groups/{group_id}/posts")
async def list_posts(
    group_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
) -> list[PostResponse]:
    """List a group's posts, newest first."""
    group_id_obj = parse_identifier(GroupId, group_id, "group")

    try:
        posts = await service.list_posts_by_group(group_id_obj)
        authors = await service.authors_of([p.author_id for p in posts])
        return [PostResponse.from_domain(p, authors) for p in posts]

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list posts",
        )


@router.post(
    "/groups/{group_id}/posts",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Post created"},
        400: {"description": "Blank or too long content"},
        403: {"description": "Not a member of the group"},
        404: {"description": "Group not found"},
        500: {"description": "Internal server error"},
    },
)
async def create_post(
    group_id: str,
    request: ContentRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
) -> PostResponse:
    """Publish a post in a group the user belongs to."""
    group_id_obj = parse_identifier(GroupId, group_id, "group")

    try:
        post = await service.create_post(group_id_obj, request.content, current_user)
        authors = await service.authors_of([post.author_id])
        return PostResponse.from_domain(post, authors)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.patch("/posts/{post_id}")
async def edit_post(
    post_id: str,
    request: ContentRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
) -> PostResponse:
    """Edit one's own post."""
    post_id_obj = parse_identifier(PostId, post_id, "post")

    try:
        post = await service.edit_post(post_id_obj, request.content, current_user)
        authors = await service.authors_of([post.author_id])
        return PostResponse.from_domain(post, authors)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to edit post",
        )


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
) -> None:
    """Delete a post (author, moderator or owner)."""
    post_id_obj = parse_identifier(PostId, post_id, "post")

    try:
        await service.delete_post(post_id_obj, current_user)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete post",
        )


@router.get("/posts/{post_id}/comments")
async def list_comments(
    post_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
) -> list[CommentResponse]:
    """List a post's comments, oldest first."""
    post_id_obj = parse_identifier(PostId, post_id, "post")

    try:
        comments = await service.list_comments_by_post(post_id_obj)
        authors = await service.authors_of([c.author_id for c in comments])
        return [CommentResponse.from_domain(c, authors) for c in comments]

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list comments",
        )


@router.post("/posts/{post_id}/comments", status_code=status.HTTP_201_CREATED)
async def create_comment(
    post_id: str,
    request: ContentRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
) -> CommentResponse:
    """Comment on a post in a group the user belongs to."""
    post_id_obj = parse_identifier(PostId, post_id, "post")

    try:
        comment = await service.create_comment(
            post_id_obj, request.content, current_user
        )
        authors = await service.authors_of([comment.author_id])
        return CommentResponse.from_domain(comment, authors)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.patch("/comments/{comment_id}")
async def edit_comment(
    comment_id: str,
    request: ContentRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
) -> CommentResponse:
    """Edit one's own comment."""
    comment_id_obj = parse_identifier(CommentId, comment_id, "comment")

    try:
        comment = await service.edit_comment(
            comment_id_obj, request.content, current_user
        )
        authors = await service.authors_of([comment.author_id])
        return CommentResponse.from_domain(comment, authors)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to edit comment",
        )


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
) -> None:
    """Delete a comment (author, moderator or owner)."""
    comment_id_obj = parse_identifier(CommentId, comment_id, "comment")

    try:
        await service.delete_comment(comment_id_obj, current_user)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )
