"""User application service for the community bounded context.

Handles registration, login and account administration.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from community.application.authorization import require_admin
from community.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from community.application.security import (
    MAX_PASSWORD_BYTES,
    hash_password,
    verify_password,
)
from community.application.value_objects import CurrentUser
from community.domain.aggregates import Profile, User
from community.domain.value_objects import AccountStatus, UserId
from community.ports.exceptions import (
    DuplicateLoginError,
    ProfileNotFoundError,
    UserNotFoundError,
)
from community.ports.repositories import IProfileRepository, IUserRepository
from shared_kernel.auth import TokenIssuer
from shared_kernel.exceptions import NotAuthenticatedError, ValidationError

_BAD_CREDENTIALS = "invalid login or password"


@dataclass(frozen=True)
class AccessToken:
    """A freshly issued bearer token."""

    token: str
    expires_in: int
    user: User


class UserService:
    """Application service for user accounts and profiles.

    Registration creates the User and its Profile in one transaction.
    """

    def __init__(
        self,
        session: AsyncSession,
        user_repository: IUserRepository,
        profile_repository: IProfileRepository,
        token_issuer: TokenIssuer,
        probe: UserServiceProbe | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            session: Database session for transaction management
            user_repository: Repository for user persistence
            profile_repository: Repository for profile persistence
            token_issuer: Issues access tokens on successful login
            probe: Optional domain probe for observability
        """
        self._session = session
        self._user_repository = user_repository
        self._profile_repository = profile_repository
        self._token_issuer = token_issuer
        self._probe = probe or DefaultUserServiceProbe()

    async def register(
        self,
        login: str,
        password: str,
        name: str,
        email: str | None = None,
        phone: str | None = None,
        timezone: str | None = None,
    ) -> User:
        """Register a new STANDARD, NORMAL, non-mentor user.

        Args:
            login: Desired login (normalized before storage)
            password: Plaintext password, hashed before storage
            name: Display name, also used as the initial profile name
            email: Optional email
            phone: Optional phone
            timezone: Optional timezone name

        Returns:
            The created User

        Raises:
            ValidationError: If login, password or name is blank
            DuplicateLoginError: If the login is already taken
        """
        if not password or not password.strip():
            self._probe.registration_failed(login=login, error="blank password")
            raise ValidationError("Password cannot be empty")
        if len(password.encode()) > MAX_PASSWORD_BYTES:
            self._probe.registration_failed(login=login, error="password too long")
            raise ValidationError(
                f"Password cannot exceed {MAX_PASSWORD_BYTES} bytes"
            )

        try:
            user = User.register(
                login=login,
                password_hash=hash_password(password),
                name=name,
                email=email,
                phone=phone,
                timezone=timezone,
            )

            async with self._session.begin():
                if await self._user_repository.get_by_login(user.login) is not None:
                    raise DuplicateLoginError(f"Login '{user.login}' is already taken")
                await self._user_repository.save(user)
                await self._profile_repository.save(
                    Profile.for_user(user_id=user.id, name=user.name)
                )
        except (ValidationError, DuplicateLoginError) as e:
            self._probe.registration_failed(login=login, error=str(e))
            raise

        self._probe.user_registered(user_id=user.id.value, login=user.login)
        return user

    async def authenticate(self, login: str, password: str) -> AccessToken:
        """Verify credentials and issue an access token.

        Unknown logins and wrong passwords produce the same error.

        Raises:
            NotAuthenticatedError: If the credentials do not match
        """
        normalized = User.normalize_login(login or "")
        async with self._session.begin():
            user = await self._user_repository.get_by_login(normalized)

        if user is None or not verify_password(password or "", user.password_hash):
            self._probe.login_failed(login=normalized)
            raise NotAuthenticatedError(_BAD_CREDENTIALS)

        token = self._token_issuer.issue(user_id=user.id.value, username=user.login)
        self._probe.login_succeeded(user_id=user.id.value, login=user.login)
        return AccessToken(
            token=token,
            expires_in=int(self._token_issuer.ttl.total_seconds()),
            user=user,
        )

    async def get_user(self, user_id: UserId) -> User:
        """Load a user by id.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        async with self._session.begin():
            user = await self._user_repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User {user_id} not found")
        return user

    async def get_by_login(self, login: str) -> User:
        """Load a user by login (case-insensitive).

        Raises:
            UserNotFoundError: If no user has this login
        """
        normalized = User.normalize_login(login or "")
        async with self._session.begin():
            user = await self._user_repository.get_by_login(normalized)
        if user is None:
            raise UserNotFoundError(f"User '{normalized}' not found")
        return user

    async def edit_account(
        self,
        actor: CurrentUser,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> User:
        """Update the actor's own contact details. Blank values are ignored."""
        async with self._session.begin():
            user = await self._user_repository.get_by_id(actor.user_id)
            if user is None:
                raise UserNotFoundError(f"User {actor.user_id} not found")
            user.edit_account(name=name, email=email, phone=phone)
            await self._user_repository.save(user)

        self._probe.account_updated(user_id=user.id.value)
        return user

    async def get_profile(self, user_id: UserId) -> Profile:
        """Load the profile of a user.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        async with self._session.begin():
            profile = await self._profile_repository.get_by_user_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(f"Profile for user {user_id} not found")
        return profile

    async def edit_profile(
        self,
        actor: CurrentUser,
        name: str | None = None,
        bio: str | None = None,
        photo_url: str | None = None,
    ) -> Profile:
        """Update the actor's own profile."""
        async with self._session.begin():
            profile = await self._profile_repository.get_by_user_id(actor.user_id)
            if profile is None:
                raise ProfileNotFoundError(
                    f"Profile for user {actor.user_id} not found"
                )
            profile.edit(name=name, bio=bio, photo_url=photo_url)
            await self._profile_repository.save(profile)

        self._probe.account_updated(user_id=actor.user_id.value)
        return profile

    async def update_account_status(
        self, user_id: UserId, status: AccountStatus, actor: CurrentUser
    ) -> User:
        """Suspend, ban or restore a user account (admin only).

        Raises:
            PermissionDeniedError: If the actor is not an admin
            UserNotFoundError: If the user does not exist
            UnchangedStatusError: If the account already has this status
        """
        require_admin(actor)
        async with self._session.begin():
            user = await self._user_repository.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(f"User {user_id} not found")
            user.change_status(status)
            await self._user_repository.save(user)

        self._probe.account_status_changed(
            user_id=user_id.value, status=status.value, actor_id=actor.user_id.value
        )
        return user

    async def set_mentor_eligibility(
        self, user_id: UserId, is_mentor: bool, actor: CurrentUser
    ) -> User:
        """Grant or revoke the right to offer mentorships (admin only)."""
        require_admin(actor)
        async with self._session.begin():
            user = await self._user_repository.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(f"User {user_id} not found")
            user.is_mentor = is_mentor
            await self._user_repository.save(user)

        self._probe.mentor_eligibility_changed(
            user_id=user_id.value, is_mentor=is_mentor, actor_id=actor.user_id.value
        )
        return user

    async def list_reported_users(self, actor: CurrentUser) -> list[User]:
        """List every user with at least one report against them (admin only)."""
        require_admin(actor)
        async with self._session.begin():
            return await self._user_repository.list_reported()
