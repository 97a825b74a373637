"""Worker do handoff em dois estágios.

Endpoint:
- POST /worker/dispatch: executa dispatch + notificação de um RelayJob

Chamado pelo Cloud Tasks. Responde 200 mesmo quando o dispatch falha,
porque a falha já foi notificada ao usuário (sem retry).
"""

from __future__ import annotations

import hmac
import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from pydantic import ValidationError as PydanticValidationError

from api.routes.slack.command import get_relay_container
from app.domain import RelayJob
from app.infra.handoff import WORKER_TOKEN_HEADER
from app.observability import correlation_scope

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/dispatch", response_model=None)
async def run_dispatch_job(request: Request) -> Response | dict[str, Any]:
    relay = get_relay_container(request)
    expected = relay.config.relay.worker_token
    provided = request.headers.get(WORKER_TOKEN_HEADER, "")
    if not expected or not hmac.compare_digest(provided.encode(), expected.encode()):
        logger.warning("worker_token_invalid")
        return Response(
            content="Unauthorized",
            media_type="text/plain",
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    raw_body = await request.body()
    try:
        job = RelayJob.model_validate_json(raw_body)
    except PydanticValidationError as exc:
        logger.warning("worker_job_invalid", extra={"error_count": exc.error_count()})
        return Response(
            content="Bad Request",
            media_type="text/plain",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    with correlation_scope(job.correlation_id or None):
        outcome = await relay.use_case.execute(job)
        logger.info(
            "relay_processing_completed",
            extra={"mode": "queued", "outcome": outcome.value},
        )
    return {"status": "completed", "outcome": outcome.value}
