"""Entrypoint da aplicação saga-relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import (
    RelayConfig,
    initialize_app,
    load_relay_config,
    validate_runtime_settings,
)
from app.bootstrap.dependencies import create_relay_container
from app.infra.handoff import drain_processing_tasks
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def _build_lifespan(config_factory: Callable[[], RelayConfig]):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: carrega config e monta o relay. Shutdown: drena tasks."""
        logger.info("app_starting", extra={"service": "saga-relay"})
        config = config_factory()
        validate_runtime_settings(config)
        if getattr(app.state, "relay", None) is None:
            app.state.relay = create_relay_container(config)

        yield

        logger.info("app_shutting_down", extra={"service": "saga-relay"})
        lost = await drain_processing_tasks(
            timeout_seconds=app.state.relay.config.relay.drain_timeout_seconds
        )
        if lost:
            logger.warning("app_shutdown_lost_notifications", extra={"lost": lost})

    return lifespan


def create_app(config_factory: Callable[[], RelayConfig] = load_relay_config) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        config_factory: Fonte da configuração (ambiente por padrão).
    """
    fastapi_app = FastAPI(
        title="saga-relay",
        description="Relay de slash commands do Slack para repository_dispatch do GitHub",
        version="1.0.0",
        lifespan=_build_lifespan(config_factory),
        docs_url=None,
        redoc_url=None,
    )
    fastapi_app.state.relay = None

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "saga-relay"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting saga-relay in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
