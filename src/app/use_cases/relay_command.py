"""Use case: dispatch do comando e notificação do resultado.

Fase em background (depois do ack). Fluxo:
1. Monta o DispatchRequest (valida o tipo de evento)
2. Chama o cliente de dispatch (uma tentativa, sem retry)
3. Envia exatamente uma notificação ao response_url
4. Broadcast opcional (best-effort) após sucesso

Nenhuma exceção escapa de execute(): a resposta HTTP já foi enviada.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from app.domain import (
    OutcomeNotification,
    broadcast_notification,
    build_dispatch_request,
    failure_notification,
    success_notification,
    usage_notification,
)
from utils.errors import DispatchError, NotificationError, ValidationError

if TYPE_CHECKING:
    from app.domain import RelayJob
    from app.protocols import DispatchClientProtocol, NotifierProtocol
    from config.settings import SlackSettings

logger = logging.getLogger(__name__)


class RelayOutcome(str, Enum):
    """Estado terminal do comando após a fase em background."""

    DISPATCH_SUCCEEDED = "dispatch_succeeded"
    DISPATCH_FAILED = "dispatch_failed"
    VALIDATION_FAILED = "validation_failed"


class RelayCommandUseCase:
    """Executa dispatch + notificação de um RelayJob."""

    def __init__(
        self,
        *,
        dispatch_client: DispatchClientProtocol,
        notifier: NotifierProtocol,
        event_prefix: str,
        slack_settings: SlackSettings | None = None,
    ) -> None:
        self._dispatch_client = dispatch_client
        self._notifier = notifier
        self._event_prefix = event_prefix
        self._slack_settings = slack_settings

    async def execute(self, job: RelayJob) -> RelayOutcome:
        command = job.to_command()
        event_type: str | None = None

        try:
            request = build_dispatch_request(command, prefix=self._event_prefix)
            event_type = request.event_type
            await self._dispatch_client.create_dispatch_event(request)
        except ValidationError as exc:
            logger.warning(
                "relay_validation_failed",
                extra={"correlation_id": job.correlation_id, "error": str(exc)},
            )
            outcome = RelayOutcome.VALIDATION_FAILED
            notification = usage_notification(job.command)
        except DispatchError as exc:
            logger.error(
                "relay_dispatch_failed",
                extra={
                    "correlation_id": job.correlation_id,
                    "event_type": event_type,
                    "error": str(exc),
                    "status_code": exc.status_code,
                },
            )
            outcome = RelayOutcome.DISPATCH_FAILED
            notification = failure_notification()
        except Exception:
            logger.exception(
                "relay_dispatch_unexpected_error",
                extra={"correlation_id": job.correlation_id, "event_type": event_type},
            )
            outcome = RelayOutcome.DISPATCH_FAILED
            notification = failure_notification()
        else:
            logger.info(
                "relay_dispatch_succeeded",
                extra={"correlation_id": job.correlation_id, "event_type": event_type},
            )
            outcome = RelayOutcome.DISPATCH_SUCCEEDED
            notification = success_notification(event_type)

        await self._send(job.response_url, notification, job=job, kind="outcome")

        if outcome is RelayOutcome.DISPATCH_SUCCEEDED and self._broadcast_enabled:
            await self._broadcast(job, event_type)

        return outcome

    @property
    def _broadcast_enabled(self) -> bool:
        return bool(self._slack_settings and self._slack_settings.broadcast_enabled)

    async def _broadcast(self, job: RelayJob, event_type: str) -> None:
        settings = self._slack_settings
        notification = broadcast_notification(
            user_name=job.user_name,
            event_name=job.args[0],
            event_type=event_type,
            channel=settings.broadcast_channel,
        )
        url = settings.broadcast_url or job.response_url
        await self._send(url, notification, job=job, kind="broadcast")

    async def _send(
        self,
        url: str,
        notification: OutcomeNotification,
        *,
        job: RelayJob,
        kind: str,
    ) -> None:
        """Envia a notificação; falhas são apenas logadas (sem retry)."""
        try:
            await self._notifier.notify(url, notification)
        except NotificationError as exc:
            logger.error(
                "relay_notification_failed",
                extra={
                    "correlation_id": job.correlation_id,
                    "kind": kind,
                    "error": str(exc),
                    "status_code": exc.status_code,
                },
            )
        except Exception:
            logger.exception(
                "relay_notification_unexpected_error",
                extra={"correlation_id": job.correlation_id, "kind": kind},
            )
        else:
            logger.info(
                "relay_notification_sent",
                extra={"correlation_id": job.correlation_id, "kind": kind},
            )
