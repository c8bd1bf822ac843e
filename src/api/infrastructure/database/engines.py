"""Async SQLAlchemy engine for the platform's PostgreSQL database.

Every bounded context shares the single engine built here; sessions are
handed out per request by ``infrastructure.database.dependencies``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

if TYPE_CHECKING:
    from infrastructure.settings import DatabaseSettings

__all__ = [
    "create_write_engine",
    "build_async_url",
]


def create_write_engine(settings: DatabaseSettings) -> AsyncEngine:
    """Create the engine that users, groups, reports and mentorships share.

    The pool never grows past ``pool_max_connections``.
    """
    url = build_async_url(settings)

    return create_async_engine(
        url,
        pool_size=settings.pool_max_connections,
        max_overflow=0,
        pool_pre_ping=True,  # drop connections the server closed while idle
        echo=False,
    )


def build_async_url(settings: DatabaseSettings) -> str:
    """Render the asyncpg connection URL from the database settings.

    Credentials are escaped by ``URL.create``, so passwords may contain
    ``@``, ``:`` or ``/``.
    """
    url = URL.create(
        drivername="postgresql+asyncpg",
        username=settings.username,
        password=settings.password.get_secret_value(),
        host=settings.host,
        port=settings.port,
        database=settings.database,
    )
    return url.render_as_string(hide_password=False)
