"""HTTP routes for the current user's account, profile and feed."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from community.application.services import ContentService, UserService
from community.application.value_objects import CurrentUser
from community.dependencies.authentication import get_current_user
from community.dependencies.services import get_content_service, get_user_service
from community.domain.value_objects import UserId
from community.presentation.content.models import PostResponse
from community.presentation.users.models import (
    ProfileResponse,
    UpdateAccountRequest,
    UpdateProfileRequest,
    UserResponse,
)
from shared_kernel.exceptions import DomainError
from shared_kernel.http_errors import parse_identifier, to_http_exception

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.get("/me")
async def get_me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Return the authenticated user's account."""
    try:
        user = await service.get_user(current_user.user_id)
        return UserResponse.from_domain(user)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve account",
        )


@router.patch("/me")
async def update_me(
    request: UpdateAccountRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Edit the authenticated user's contact details."""
    try:
        user = await service.edit_account(
            actor=current_user,
            name=request.name,
            email=request.email,
            phone=request.phone,
        )
        return UserResponse.from_domain(user)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update account",
        )


@router.patch("/me/profile")
async def update_my_profile(
    request: UpdateProfileRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> ProfileResponse:
    """Edit the authenticated user's profile."""
    try:
        profile = await service.edit_profile(
            actor=current_user,
            name=request.name,
            bio=request.bio,
            photo_url=request.photo_url,
        )
        return ProfileResponse.from_domain(profile)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update profile",
        )


@router.get("/me/feed")
async def get_my_feed(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[ContentService, Depends(get_content_service)],
) -> list[PostResponse]:
    """The latest posts across every group the user belongs to."""
    try:
        posts = await service.feed_for_user(current_user)
        authors = await service.authors_of([p.author_id for p in posts])
        return [PostResponse.from_domain(p, authors) for p in posts]

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load feed",
        )


@router.get("/{user_id}/profile")
async def get_profile(
    user_id: str,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> ProfileResponse:
    """Return any user's public profile."""
    user_id_obj = parse_identifier(UserId, user_id, "user")

    try:
        profile = await service.get_profile(user_id_obj)
        return ProfileResponse.from_domain(profile)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve profile",
        )
