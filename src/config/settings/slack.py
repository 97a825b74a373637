"""Settings específicas do Slack.

Assinatura de requests (signing secret) e broadcast opcional.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Janela anti-replay recomendada pelo Slack
DEFAULT_TIMESTAMP_TOLERANCE_SECONDS: int = 300


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do canal Slack.

    Attributes:
        signing_secret: Secret compartilhado para validação HMAC
        timestamp_tolerance_seconds: Idade máxima do X-Slack-Request-Timestamp
        broadcast_enabled: Envia anúncio in_channel após dispatch bem-sucedido
        broadcast_channel: Canal informado no anúncio (ex: #releases)
        broadcast_url: URL de destino do anúncio (usa response_url se vazio)
    """

    signing_secret: str = ""
    timestamp_tolerance_seconds: int = DEFAULT_TIMESTAMP_TOLERANCE_SECONDS

    broadcast_enabled: bool = False
    broadcast_channel: str = ""
    broadcast_url: str = ""

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Slack.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.signing_secret:
            errors.append("SLACK_SIGNING_SECRET não configurado")

        if self.timestamp_tolerance_seconds <= 0:
            errors.append("SLACK_TIMESTAMP_TOLERANCE_SECONDS deve ser > 0")

        if self.broadcast_enabled and not self.broadcast_channel:
            errors.append(
                "SLACK_BROADCAST_ENABLED requer SLACK_BROADCAST_CHANNEL"
            )

        return errors


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    return SlackSettings(
        signing_secret=os.getenv("SLACK_SIGNING_SECRET", ""),
        timestamp_tolerance_seconds=int(
            os.getenv(
                "SLACK_TIMESTAMP_TOLERANCE_SECONDS",
                str(DEFAULT_TIMESTAMP_TOLERANCE_SECONDS),
            )
        ),
        broadcast_enabled=os.getenv("SLACK_BROADCAST_ENABLED", "").lower()
        in ("true", "1", "yes"),
        broadcast_channel=os.getenv("SLACK_BROADCAST_CHANNEL", ""),
        broadcast_url=os.getenv("SLACK_BROADCAST_URL", ""),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings."""
    return _load_from_env()
