"""Community presentation layer - aggregate-based organization.

Each aggregate package contains its own routes and models. Auth is enforced
per-endpoint (each handler declares its own Depends), so registration and
login stay public.
"""

from __future__ import annotations

from fastapi import APIRouter

from community.presentation.auth.routes import router as auth_router
from community.presentation.content.routes import router as content_router
from community.presentation.groups.routes import router as groups_router
from community.presentation.notifications.routes import (
    router as notifications_router,
)
from community.presentation.reports.routes import admin_router
from community.presentation.reports.routes import router as reports_router
from community.presentation.users.routes import router as users_router

router = APIRouter()

router.include_router(auth_router)
router.include_router(users_router)
router.include_router(groups_router)
router.include_router(content_router)
router.include_router(reports_router)
router.include_router(admin_router)
router.include_router(notifications_router)

__all__ = ["router"]
