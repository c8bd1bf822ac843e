"""Mentoring presentation layer."""

from __future__ import annotations

from fastapi import APIRouter

from mentoring.presentation.mentorships.routes import router as mentorships_router

router = APIRouter()

router.include_router(mentorships_router)

__all__ = ["router"]
