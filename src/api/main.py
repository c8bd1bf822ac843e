"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from community.presentation import router as community_router
from infrastructure.database.dependencies import close_database_connections
from infrastructure.logging import configure_logging
from infrastructure.settings import get_settings
from infrastructure.version import __version__
from mentoring.presentation import router as mentoring_router


@asynccontextmanager
async def systers_lifespan(app: FastAPI):
    """Application lifespan context.

    The database engine is created lazily on the first request and
    disposed on shutdown.
    """
    yield

    await close_database_connections()


settings = get_settings()
configure_logging(debug=settings.debug)

app = FastAPI(
    title=settings.app_name,
    description="Mentoring and community platform",
    version=__version__,
    lifespan=systers_lifespan,
)

# Bounded context routes
app.include_router(community_router)
app.include_router(mentoring_router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
