"""Endpoint de health check para Cloud Run."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    processing_mode: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    relay = getattr(request.app.state, "relay", None)
    return HealthResponse(
        status="healthy",
        service="saga-relay",
        processing_mode=relay.config.relay.processing_mode if relay else "unknown",
        timestamp=datetime.now(UTC).isoformat(),
    )
