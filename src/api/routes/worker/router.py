"""Router do worker (handoff queued)."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.worker.dispatch import router as dispatch_router

router = APIRouter()

router.include_router(dispatch_router)
