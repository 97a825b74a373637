"""Settings do relay (ack, modo de processamento, worker)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

ProcessingMode = Literal["async", "queued", "inline"]
BodyEncoding = Literal["base64", "identity"]

DEFAULT_ACK_TEXT: str = "Got it! Dispatching your command..."


@dataclass(frozen=True)
class RelaySettings:
    """Configurações do fluxo validar → ack → dispatch → notificar.

    Attributes:
        processing_mode: async (task em processo), queued (Cloud Tasks + worker)
            ou inline (somente desenvolvimento)
        body_encoding: Codificação de transporte do body (base64|identity)
        ack_text: Texto do ack imediato (ephemeral)
        validate_before_ack: Rejeita comando sem evento com 400 antes do ack
        worker_token: Token exigido em /worker/dispatch
        drain_timeout_seconds: Espera máxima por tasks pendentes no shutdown
    """

    processing_mode: ProcessingMode = "async"
    body_encoding: BodyEncoding = "base64"
    ack_text: str = DEFAULT_ACK_TEXT
    validate_before_ack: bool = True
    worker_token: str = ""
    drain_timeout_seconds: float = 30.0

    def validate(self, is_development: bool) -> list[str]:
        """Valida configurações do relay.

        Args:
            is_development: Se está em ambiente de desenvolvimento.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.processing_mode not in ("async", "queued", "inline"):
            errors.append(
                "RELAY_PROCESSING_MODE deve ser 'async', 'queued' ou 'inline'"
            )

        if self.processing_mode == "inline" and not is_development:
            errors.append(
                "RELAY_PROCESSING_MODE=inline proibido em staging/production"
            )

        if self.processing_mode == "queued" and not self.worker_token:
            errors.append("RELAY_PROCESSING_MODE=queued requer RELAY_WORKER_TOKEN")

        if self.body_encoding not in ("base64", "identity"):
            errors.append("RELAY_BODY_ENCODING deve ser 'base64' ou 'identity'")

        if self.drain_timeout_seconds < 0:
            errors.append("RELAY_DRAIN_TIMEOUT_SECONDS deve ser >= 0")

        return errors


def _load_from_env() -> RelaySettings:
    """Carrega RelaySettings a partir de variáveis de ambiente."""
    return RelaySettings(
        processing_mode=os.getenv("RELAY_PROCESSING_MODE", "async").lower(),  # type: ignore[arg-type]
        body_encoding=os.getenv("RELAY_BODY_ENCODING", "base64").lower(),  # type: ignore[arg-type]
        ack_text=os.getenv("RELAY_ACK_TEXT", DEFAULT_ACK_TEXT),
        validate_before_ack=os.getenv("RELAY_VALIDATE_BEFORE_ACK", "true").lower()
        in ("true", "1", "yes"),
        worker_token=os.getenv("RELAY_WORKER_TOKEN", ""),
        drain_timeout_seconds=float(os.getenv("RELAY_DRAIN_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_relay_settings() -> RelaySettings:
    """Retorna instância cacheada de RelaySettings."""
    return _load_from_env()
