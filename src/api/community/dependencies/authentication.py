"""Request authentication: bearer token to CurrentUser."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from community.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from community.application.value_objects import CurrentUser
from community.dependencies.repositories import Session, get_user_repository
from community.domain.exceptions import AccountRestrictedError
from community.domain.value_objects import UserId
from community.infrastructure import UserRepository
from infrastructure.settings import get_auth_settings
from shared_kernel.auth import (
    DefaultJWTValidatorProbe,
    InvalidTokenError,
    JWTValidator,
    TokenIssuer,
)
from shared_kernel.exceptions import NotAuthenticatedError
from shared_kernel.http_errors import to_http_exception

# Swagger UI's Authorize button posts to the login route
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


@lru_cache
def get_jwt_validator() -> JWTValidator:
    """Get cached JWT validator configured from auth settings."""
    settings = get_auth_settings()
    return JWTValidator(
        secret_key=settings.secret_key.get_secret_value(),
        issuer=settings.issuer,
        probe=DefaultJWTValidatorProbe(),
        algorithm=settings.algorithm,
    )


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Get cached token issuer configured from auth settings."""
    settings = get_auth_settings()
    return TokenIssuer(
        secret_key=settings.secret_key.get_secret_value(),
        issuer=settings.issuer,
        algorithm=settings.algorithm,
        ttl=settings.access_token_ttl,
    )


def get_authentication_probe() -> AuthenticationProbe:
    """Get AuthenticationProbe instance.

    Returns:
        DefaultAuthenticationProbe instance for observability
    """
    return DefaultAuthenticationProbe()


async def get_current_user(
    validator: Annotated[JWTValidator, Depends(get_jwt_validator)],
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    session: Session,
    probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
    token: Annotated[str | None, Depends(oauth2_scheme)] = None,
) -> CurrentUser:
    """Resolve the acting user from the bearer token.

    The token must be valid and its subject must still exist. Accounts that
    are suspended or banned are rejected even with a valid token.

    Raises:
        HTTPException 401: If the token is missing, invalid or refers to an
            unknown user
        HTTPException 403: If the account is suspended or banned
    """
    if token is None:
        probe.authentication_failed(reason="missing bearer token")
        raise to_http_exception(NotAuthenticatedError())

    try:
        claims = validator.validate_token(token)
    except InvalidTokenError as e:
        probe.authentication_failed(reason=str(e))
        raise to_http_exception(NotAuthenticatedError(str(e))) from e

    async with session.begin():
        user = await user_repository.get_by_id(UserId(value=claims.sub))

    if user is None:
        probe.authentication_failed(reason="unknown subject")
        raise to_http_exception(NotAuthenticatedError())

    if not user.can_act():
        probe.restricted_account_rejected(
            user_id=user.id.value, status=user.status.value
        )
        raise to_http_exception(
            AccountRestrictedError(f"account is {user.status.value}")
        )

    probe.user_authenticated(user_id=user.id.value, login=user.login)
    return CurrentUser.from_user(user)
