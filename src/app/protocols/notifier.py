"""Protocolo de envio da notificação de resultado."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain import OutcomeNotification


class NotifierProtocol(Protocol):
    """Contrato mínimo para POST de follow-up no Slack.

    Implementações levantam NotificationError em qualquer falha.
    """

    async def notify(self, url: str, notification: OutcomeNotification) -> None: ...
