"""Router do Slack: agrega os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.slack.command import router as command_router

router = APIRouter()

router.include_router(command_router)
