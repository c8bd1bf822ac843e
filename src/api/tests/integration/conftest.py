"""Integration test fixtures.

Repositories and services run against a file-backed SQLite database
(aiosqlite) created from the ORM metadata, with foreign keys enforced so
that cascades behave as they do on PostgreSQL.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

import community.infrastructure.models  # noqa: F401
import mentoring.infrastructure.models  # noqa: F401
from community.application.services import (
    ContentService,
    GroupService,
    ReportService,
    UserService,
)
from community.application.value_objects import CurrentUser
from community.infrastructure import (
    CommentRepository,
    GroupRepository,
    MembershipRepository,
    PostRepository,
    ProfileRepository,
    ReportRepository,
    UserRepository,
)
from infrastructure.database.models import Base
from mentoring.application.services import EvaluationService, MentorshipService
from mentoring.infrastructure import (
    DialogueRepository,
    EvaluationRepository,
    MentorshipRepository,
    ParticipantRepository,
)
from shared_kernel.auth import TokenIssuer


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Provide an engine bound to a fresh database with every table created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'systers.db'}")
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def async_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide the session shared by every service, like a single request."""
    async with session_factory() as session:
        yield session


@dataclass
class Services:
    users: UserService
    groups: GroupService
    content: ContentService
    reports: ReportService
    mentorships: MentorshipService
    evaluations: EvaluationService


@pytest.fixture
def services(async_session: AsyncSession) -> Services:
    """Wire every service to repositories sharing one session."""
    user_repo = UserRepository(session=async_session)
    group_repo = GroupRepository(session=async_session)
    membership_repo = MembershipRepository(session=async_session)
    post_repo = PostRepository(session=async_session)
    comment_repo = CommentRepository(session=async_session)
    mentorship_repo = MentorshipRepository(session=async_session)
    participant_repo = ParticipantRepository(session=async_session)

    return Services(
        users=UserService(
            session=async_session,
            user_repository=user_repo,
            profile_repository=ProfileRepository(session=async_session),
            token_issuer=TokenIssuer(secret_key="it-secret", issuer="systers-it"),
        ),
        groups=GroupService(
            session=async_session,
            group_repository=group_repo,
            membership_repository=membership_repo,
            post_repository=post_repo,
            comment_repository=comment_repo,
            user_repository=user_repo,
        ),
        content=ContentService(
            session=async_session,
            group_repository=group_repo,
            membership_repository=membership_repo,
            post_repository=post_repo,
            comment_repository=comment_repo,
        ),
        reports=ReportService(
            session=async_session,
            report_repository=ReportRepository(session=async_session),
            user_repository=user_repo,
        ),
        mentorships=MentorshipService(
            session=async_session,
            mentorship_repository=mentorship_repo,
            participant_repository=participant_repo,
            dialogue_repository=DialogueRepository(session=async_session),
        ),
        evaluations=EvaluationService(
            session=async_session,
            mentorship_repository=mentorship_repo,
            participant_repository=participant_repo,
            evaluation_repository=EvaluationRepository(session=async_session),
        ),
    )


@pytest.fixture
def register(services: Services):
    """Register a user and return the CurrentUser acting on their behalf."""

    async def _register(login: str, name: str | None = None) -> CurrentUser:
        user = await services.users.register(
            login=login, password="s3cret-pass", name=name or login.title()
        )
        return CurrentUser.from_user(user)

    return _register
