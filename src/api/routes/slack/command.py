"""Endpoint do slash command do Slack.

Endpoint:
- POST /: recebimento do slash command

Fluxo:
1. Valida assinatura HMAC (X-Slack-Signature + X-Slack-Request-Timestamp)
2. Decodifica o body (transporte + form-urlencoded) e exige response_url
3. Valida o tipo de evento (quando RELAY_VALIDATE_BEFORE_ACK)
4. Entrega o RelayJob ao handoff configurado
5. Responde 200 com ack ephemeral, antes do dispatch terminar

Segurança:
- Assinatura obrigatória; 401 genérico em qualquer falha de autenticação
- Nenhum dispatch é tentado antes da validação
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.slack import (
    decode_command_body,
    validate_command,
    verify_slack_signature,
)
from app.domain import RelayJob, build_dispatch_request
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from utils.errors import AuthenticationError, ValidationError

if TYPE_CHECKING:
    from app.bootstrap.dependencies import RelayContainer

logger = logging.getLogger(__name__)

router = APIRouter()


def get_relay_container(request: Request) -> RelayContainer:
    """Objetos montados no startup (ver app.app.lifespan)."""
    return request.app.state.relay


def _text_response(content: str, status_code: int) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


@router.post("/", response_model=None)
async def receive_command(request: Request) -> Response | dict[str, Any]:
    """Recebe o slash command e responde o ack imediato.

    Returns:
        {"response_type": "ephemeral", "text": <ack>} ou Response de erro.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        relay = get_relay_container(request)
        config = relay.config
        raw_body = await request.body()

        try:
            verify_slack_signature(
                raw_body,
                request.headers,
                config.slack.signing_secret,
                tolerance_seconds=config.slack.timestamp_tolerance_seconds,
            )
        except AuthenticationError:
            logger.warning(
                "slack_signature_invalid",
                extra={"payload_size": len(raw_body)},
            )
            return _text_response("Unauthorized", status.HTTP_401_UNAUTHORIZED)

        try:
            command = validate_command(
                decode_command_body(raw_body, config.relay.body_encoding)
            )
            if config.relay.validate_before_ack:
                build_dispatch_request(command, prefix=config.github.event_prefix)
        except ValidationError as exc:
            logger.warning("slack_command_invalid", extra={"error": str(exc)})
            return _text_response("Bad Request", status.HTTP_400_BAD_REQUEST)

        job = RelayJob.from_command(command, correlation_id=get_correlation_id())
        try:
            await relay.handoff.submit(job)
        except Exception:
            logger.exception(
                "slack_command_handoff_failed",
                extra={"processing_mode": config.relay.processing_mode},
            )
            return _text_response(
                "Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        logger.info(
            "slack_command_acknowledged",
            extra={
                "event_name": command.event_name,
                "arg_count": len(command.args),
                "processing_mode": config.relay.processing_mode,
            },
        )
        return {"response_type": "ephemeral", "text": config.relay.ack_text}
    finally:
        reset_correlation_id(token)
