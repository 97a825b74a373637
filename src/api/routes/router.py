"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.slack.router import router as slack_router
from api.routes.worker.router import router as worker_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    api_router.include_router(health_router, tags=["health"])

    # Slash command na raiz (URL única exposta ao Slack)
    api_router.include_router(slack_router, tags=["slack"])

    api_router.include_router(worker_router, prefix="/worker", tags=["worker"])

    return api_router
