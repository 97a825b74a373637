"""Handoff em dois estágios via Google Cloud Tasks.

O handler de entrada só enfileira uma task HTTP; o worker
(/worker/dispatch) executa dispatch + notificação com orçamento próprio,
sobrevivendo a reciclagem do processo que respondeu ao Slack.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from google.cloud import tasks_v2

from app.infra.handoff.constants import WORKER_TOKEN_HEADER

if TYPE_CHECKING:
    from app.domain import RelayJob
    from config.settings import CloudTasksSettings

logger = logging.getLogger(__name__)


class CloudTasksHandoff:
    """Cria uma task HTTP POST com o RelayJob serializado em JSON."""

    def __init__(
        self,
        settings: CloudTasksSettings,
        *,
        worker_token: str,
        client: Any | None = None,
    ) -> None:
        self._settings = settings
        self._worker_token = worker_token
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = tasks_v2.CloudTasksAsyncClient()
        return self._client

    def build_task(self, job: RelayJob) -> tasks_v2.Task:
        http_request = tasks_v2.HttpRequest(
            http_method=tasks_v2.HttpMethod.POST,
            url=self._settings.worker_url,
            headers={
                "Content-Type": "application/json",
                WORKER_TOKEN_HEADER: self._worker_token,
            },
            body=job.model_dump_json().encode("utf-8"),
        )
        if self._settings.service_account_email:
            http_request.oidc_token = tasks_v2.OidcToken(
                service_account_email=self._settings.service_account_email,
                audience=self._settings.worker_url,
            )
        return tasks_v2.Task(http_request=http_request)

    async def submit(self, job: RelayJob) -> None:
        client = self._get_client()
        parent = client.queue_path(
            self._settings.project_id,
            self._settings.location,
            self._settings.queue,
        )
        created = await client.create_task(parent=parent, task=self.build_task(job))
        logger.info(
            "relay_processing_enqueued",
            extra={
                "correlation_id": job.correlation_id,
                "mode": "queued",
                "task_name": getattr(created, "name", ""),
            },
        )
