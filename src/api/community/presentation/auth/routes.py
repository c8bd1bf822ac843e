"""HTTP routes for registration, login and logout."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from community.application.services import UserService
from community.application.value_objects import CurrentUser
from community.dependencies.authentication import get_current_user
from community.dependencies.services import get_user_service
from community.presentation.auth.models import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from community.presentation.users.models import UserResponse
from shared_kernel.exceptions import DomainError
from shared_kernel.http_errors import to_http_exception

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    responses={
        201: {"description": "Account created"},
        400: {"description": "Blank login, password or name"},
        409: {"description": "Login already taken"},
        500: {"description": "Internal server error"},
    },
)
async def register(
    request: RegisterRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Create a new account and its profile."""
    try:
        user = await service.register(
            login=request.login,
            password=request.password,
            name=request.name,
            email=request.email,
            phone=request.phone,
            timezone=request.timezone,
        )
        return UserResponse.from_domain(user)

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to register user",
        )


@router.post(
    "/login",
    summary="Log in",
    responses={
        200: {"description": "Access token issued"},
        401: {"description": "Invalid login or password"},
        500: {"description": "Internal server error"},
    },
)
async def login(
    request: LoginRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> TokenResponse:
    """Exchange credentials for a bearer access token."""
    try:
        issued = await service.authenticate(
            login=request.login, password=request.password
        )
        return TokenResponse(
            access_token=issued.token,
            expires_in=issued.expires_in,
            user=UserResponse.from_domain(issued.user),
        )

    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to log in",
        )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> None:
    """End the session.

    Tokens are stateless; the client discards its token.
    """
    return None
