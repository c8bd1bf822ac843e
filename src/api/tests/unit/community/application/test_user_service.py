"""Unit tests for UserService (registration, login, account administration)."""

from unittest.mock import create_autospec

import pytest

from community.application.observability import UserServiceProbe
from community.application.security import hash_password
from community.application.services import UserService
from community.domain.aggregates import Profile, User
from community.domain.exceptions import UnchangedStatusError
from community.domain.value_objects import AccountStatus, UserId
from community.ports.exceptions import DuplicateLoginError, UserNotFoundError
from community.ports.repositories import IProfileRepository, IUserRepository
from shared_kernel.auth import JWTValidator, JWTValidatorProbe, TokenIssuer
from shared_kernel.exceptions import (
    NotAuthenticatedError,
    PermissionDeniedError,
    ValidationError,
)


@pytest.fixture
def user_repo():
    repo = create_autospec(IUserRepository, instance=True)
    repo.get_by_login.return_value = None
    return repo


@pytest.fixture
def profile_repo():
    return create_autospec(IProfileRepository, instance=True)


@pytest.fixture
def probe():
    return create_autospec(UserServiceProbe, instance=True)


@pytest.fixture
def issuer():
    return TokenIssuer(secret_key="test-secret", issuer="systers-test")


@pytest.fixture
def service(mock_session, user_repo, profile_repo, issuer, probe):
    return UserService(
        session=mock_session,
        user_repository=user_repo,
        profile_repository=profile_repo,
        token_issuer=issuer,
        probe=probe,
    )


class TestRegister:
    @pytest.mark.asyncio
    async def test_creates_user_and_profile(self, service, user_repo, profile_repo):
        user = await service.register(
            login="Ada", password="s3cret", name="Ada Lovelace", email="ada@example.com"
        )

        assert user.login == "ada"
        assert user.password_hash != "s3cret"
        assert user.is_mentor is False
        user_repo.save.assert_awaited_once_with(user)

        profile = profile_repo.save.call_args.args[0]
        assert isinstance(profile, Profile)
        assert profile.user_id == user.id
        assert profile.name == "Ada Lovelace"

    @pytest.mark.asyncio
    async def test_duplicate_login_is_rejected(
        self, service, user_repo, profile_repo, probe
    ):
        user_repo.get_by_login.return_value = User.register(
            login="ada", password_hash="h", name="Ada"
        )

        with pytest.raises(DuplicateLoginError):
            await service.register(login="ADA", password="pw", name="Other Ada")

        user_repo.save.assert_not_called()
        profile_repo.save.assert_not_called()
        probe.registration_failed.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["", "   "])
    async def test_blank_password(self, service, user_repo, password):
        with pytest.raises(ValidationError):
            await service.register(login="ada", password=password, name="Ada")
        user_repo.get_by_login.assert_not_called()

    @pytest.mark.asyncio
    async def test_password_longer_than_bcrypt_input(self, service, user_repo):
        with pytest.raises(ValidationError):
            await service.register(login="ada", password="p" * 73, name="Ada")
        user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_blank_name(self, service, user_repo, probe):
        with pytest.raises(ValidationError):
            await service.register(login="ada", password="pw", name=" ")
        user_repo.save.assert_not_called()
        probe.registration_failed.assert_called_once()


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_valid_credentials_issue_verifiable_token(
        self, service, user_repo, issuer
    ):
        user = User.register(
            login="ada", password_hash=hash_password("s3cret"), name="Ada"
        )
        user_repo.get_by_login.return_value = user

        result = await service.authenticate(" ADA ", "s3cret")

        user_repo.get_by_login.assert_awaited_once_with("ada")
        assert result.user is user
        assert result.expires_in == 3600
        validator = JWTValidator(
            secret_key="test-secret",
            issuer="systers-test",
            probe=create_autospec(JWTValidatorProbe, instance=True),
        )
        claims = validator.validate_token(result.token)
        assert claims.sub == user.id.value
        assert claims.preferred_username == "ada"

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_login_look_the_same(
        self, service, user_repo
    ):
        user_repo.get_by_login.return_value = User.register(
            login="ada", password_hash=hash_password("s3cret"), name="Ada"
        )
        with pytest.raises(NotAuthenticatedError) as wrong_password:
            await service.authenticate("ada", "nope")

        user_repo.get_by_login.return_value = None
        with pytest.raises(NotAuthenticatedError) as unknown_login:
            await service.authenticate("nobody", "nope")

        assert str(wrong_password.value) == str(unknown_login.value)


class TestAccountAdministration:
    @pytest.mark.asyncio
    async def test_admin_bans_user(self, service, user_repo, admin):
        user = User.register(login="troll", password_hash="h", name="Troll")
        user_repo.get_by_id.return_value = user

        result = await service.update_account_status(
            user.id, AccountStatus.BANNED, admin
        )

        assert result.status == AccountStatus.BANNED
        user_repo.save.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_non_admin_cannot_change_status(self, service, user_repo, alice):
        with pytest.raises(PermissionDeniedError):
            await service.update_account_status(
                UserId.generate(), AccountStatus.BANNED, alice
            )
        user_repo.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_same_status_is_rejected(self, service, user_repo, admin):
        user = User.register(login="quiet", password_hash="h", name="Quiet")
        user_repo.get_by_id.return_value = user

        with pytest.raises(UnchangedStatusError):
            await service.update_account_status(user.id, AccountStatus.NORMAL, admin)
        user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_user(self, service, user_repo, admin):
        user_repo.get_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            await service.update_account_status(
                UserId.generate(), AccountStatus.SUSPENDED, admin
            )

    @pytest.mark.asyncio
    async def test_admin_grants_mentor_eligibility(self, service, user_repo, admin):
        user = User.register(login="grace", password_hash="h", name="Grace")
        user_repo.get_by_id.return_value = user

        result = await service.set_mentor_eligibility(user.id, True, admin)

        assert result.is_mentor is True

    @pytest.mark.asyncio
    async def test_reported_users_require_admin(self, service, user_repo, alice):
        with pytest.raises(PermissionDeniedError):
            await service.list_reported_users(alice)
        user_repo.list_reported.assert_not_called()


class TestProfile:
    @pytest.mark.asyncio
    async def test_edit_own_profile(self, service, profile_repo, alice):
        profile = Profile.for_user(user_id=alice.user_id, name="Alice")
        profile_repo.get_by_user_id.return_value = profile

        result = await service.edit_profile(alice, bio="Pythonista")

        assert result.bio == "Pythonista"
        profile_repo.get_by_user_id.assert_awaited_once_with(alice.user_id)
        profile_repo.save.assert_awaited_once_with(profile)
