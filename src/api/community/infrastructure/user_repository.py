"""SQLAlchemy implementation of IUserRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from community.domain.aggregates import User
from community.domain.value_objects import AccountStatus, AuthorizationLevel, UserId
from community.infrastructure.models import ReportModel, UserModel
from community.ports.exceptions import DuplicateLoginError
from community.ports.repositories import IUserRepository
from infrastructure.database import violates_unique_constraint


class UserRepository(IUserRepository):
    """Relational repository for User aggregates."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: AsyncSession from FastAPI dependency injection
        """
        self._session = session

    async def save(self, user: User) -> None:
        """Persist a user aggregate (create or update).

        Raises:
            DuplicateLoginError: If another user already has this login
        """
        stmt = select(UserModel).where(UserModel.id == user.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model:
            model.login = user.login
            model.password_hash = user.password_hash
            model.name = user.name
            model.email = user.email
            model.phone = user.phone
            model.timezone = user.timezone
            model.authorization = user.authorization.value
            model.status = user.status.value
            model.is_mentor = user.is_mentor
        else:
            model = UserModel(
                id=user.id.value,
                login=user.login,
                password_hash=user.password_hash,
                name=user.name,
                email=user.email,
                phone=user.phone,
                timezone=user.timezone,
                authorization=user.authorization.value,
                status=user.status.value,
                is_mentor=user.is_mentor,
            )
            self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if violates_unique_constraint(e, "uq_users_login", "users.login"):
                raise DuplicateLoginError(
                    f"Login '{user.login}' is already taken"
                ) from e
            raise

    async def get_by_id(self, user_id: UserId) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def get_by_login(self, login: str) -> User | None:
        stmt = select(UserModel).where(UserModel.login == login)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_reported(self) -> list[User]:
        reported = select(ReportModel.reported_id).distinct()
        stmt = (
            select(UserModel)
            .where(UserModel.id.in_(reported))
            .order_by(UserModel.login)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=UserId(value=model.id),
            login=model.login,
            password_hash=model.password_hash,
            name=model.name,
            email=model.email,
            phone=model.phone,
            timezone=model.timezone,
            authorization=AuthorizationLevel(model.authorization),
            status=AccountStatus(model.status),
            is_mentor=model.is_mentor,
        )
