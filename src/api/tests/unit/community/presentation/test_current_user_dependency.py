"""Unit tests for resolving the acting user from a bearer token."""

from __future__ import annotations

from unittest.mock import create_autospec

import pytest
from fastapi import HTTPException, status

from community.application.observability import AuthenticationProbe
from community.dependencies.authentication import get_current_user
from community.domain.aggregates import User
from community.domain.value_objects import AccountStatus, AuthorizationLevel
from community.ports.repositories import IUserRepository
from shared_kernel.auth import JWTValidator, JWTValidatorProbe, TokenIssuer

SECRET = "unit-test-secret"
ISSUER = "systers-test"


@pytest.fixture
def issuer() -> TokenIssuer:
    return TokenIssuer(secret_key=SECRET, issuer=ISSUER)


@pytest.fixture
def validator() -> JWTValidator:
    return JWTValidator(
        secret_key=SECRET,
        issuer=ISSUER,
        probe=create_autospec(JWTValidatorProbe, instance=True),
    )


@pytest.fixture
def user_repo():
    return create_autospec(IUserRepository, instance=True)


@pytest.fixture
def probe():
    return create_autospec(AuthenticationProbe, instance=True)


@pytest.fixture
def resolve(validator, user_repo, mock_session, probe):
    async def _resolve(token):
        return await get_current_user(
            validator=validator,
            user_repository=user_repo,
            session=mock_session,
            probe=probe,
            token=token,
        )

    return _resolve


@pytest.mark.asyncio
async def test_valid_token_resolves_current_user(resolve, issuer, user_repo):
    user = User.register(login="ada", password_hash="h", name="Ada")
    user.authorization = AuthorizationLevel.ADMIN
    user.is_mentor = True
    user_repo.get_by_id.return_value = user

    current = await resolve(issuer.issue(user_id=user.id.value, username="ada"))

    assert current.user_id == user.id
    assert current.login == "ada"
    assert current.is_admin
    assert current.is_mentor


@pytest.mark.asyncio
async def test_missing_token_is_401(resolve, user_repo, probe):
    with pytest.raises(HTTPException) as exc_info:
        await resolve(None)

    assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED
    assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}
    user_repo.get_by_id.assert_not_called()
    probe.authentication_failed.assert_called_once()


@pytest.mark.asyncio
async def test_token_from_another_issuer_is_401(resolve, user_repo):
    foreign = TokenIssuer(secret_key=SECRET, issuer="someone-else")

    with pytest.raises(HTTPException) as exc_info:
        await resolve(foreign.issue(user_id="01H0000000000000000000000", username="x"))

    assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED
    user_repo.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_garbage_token_is_401(resolve):
    with pytest.raises(HTTPException) as exc_info:
        await resolve("not.a.jwt")

    assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
async def test_deleted_subject_is_401(resolve, issuer, user_repo):
    user_repo.get_by_id.return_value = None

    with pytest.raises(HTTPException) as exc_info:
        await resolve(issuer.issue(user_id="01HZZZZZZZZZZZZZZZZZZZZZZZ", username="x"))

    assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
@pytest.mark.parametrize("account_status", [AccountStatus.SUSPENDED, AccountStatus.BANNED])
async def test_restricted_account_is_403(resolve, issuer, user_repo, probe, account_status):
    user = User.register(login="troll", password_hash="h", name="Troll")
    user.change_status(account_status)
    user_repo.get_by_id.return_value = user

    with pytest.raises(HTTPException) as exc_info:
        await resolve(issuer.issue(user_id=user.id.value, username="troll"))

    assert exc_info.value.status_code == status.HTTP_403_FORBIDDEN
    assert exc_info.value.detail == f"account is {account_status.value}"
    probe.restricted_account_rejected.assert_called_once_with(
        user_id=user.id.value, status=account_status.value
    )
