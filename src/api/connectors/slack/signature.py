"""Validação de assinatura HMAC-SHA256 do Slack.

Base string: "v0:<timestamp>:<raw_body>"
Assinatura: "v0=" + hex(HMAC_SHA256(signing_secret, base_string))
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import time
from typing import TYPE_CHECKING, NoReturn

from utils.errors import AuthenticationError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

SIGNATURE_VERSION = "v0"
SIGNATURE_HEADER = "X-Slack-Signature"
TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"
DEFAULT_TOLERANCE_SECONDS = 300


def compute_slack_signature(raw_body: bytes, timestamp: str, secret: str) -> str:
    """Calcula a assinatura esperada para o body bruto.

    Args:
        raw_body: Corpo bruto exatamente como recebido
        timestamp: Valor de X-Slack-Request-Timestamp
        secret: Signing secret do app Slack

    Returns:
        Assinatura no formato "v0=<hex>"
    """
    basestring = f"{SIGNATURE_VERSION}:{timestamp}:".encode() + raw_body
    digest = hmac.new(secret.encode("utf-8"), basestring, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_VERSION}={digest}"


def _header(headers: Mapping[str, str], name: str) -> str:
    # Headers podem chegar com qualquer capitalização
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return ""


def verify_slack_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
    *,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
    now: float | None = None,
) -> None:
    """Valida assinatura e frescor do request do Slack.

    Args:
        raw_body: Corpo bruto, sem nenhuma transformação
        headers: Headers recebidos
        secret: Signing secret (vazio/None = rejeita)
        tolerance_seconds: Diferença máxima entre timestamp e relógio local
        now: Epoch atual (injetável em testes)

    Raises:
        AuthenticationError: Em qualquer falha; o motivo vai só para o log.
    """
    if not secret:
        _reject("missing_signing_secret")

    signature = _header(headers, SIGNATURE_HEADER)
    timestamp = _header(headers, TIMESTAMP_HEADER)
    if not signature or not timestamp:
        _reject("missing_signature_headers")

    try:
        timestamp_value = int(timestamp)
    except ValueError:
        _reject("invalid_timestamp")

    # Comparação inteira: timestamps enormes não podem virar float
    current = int(time.time() if now is None else now)
    if abs(current - timestamp_value) > tolerance_seconds:
        _reject("stale_timestamp")

    expected = compute_slack_signature(raw_body, timestamp, secret)
    if not hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8")):
        _reject("signature_mismatch")


def _reject(reason: str) -> NoReturn:
    logger.warning("slack_signature_rejected", extra={"reason": reason})
    raise AuthenticationError("slack_authentication_failed")
