"""Settings do Cloud Tasks.

Configurações do handoff em dois estágios: o handler de entrada enfileira
uma task HTTP que chama o worker (/worker/dispatch).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class CloudTasksSettings:
    """Configurações do Cloud Tasks.

    Attributes:
        project_id: ID do projeto GCP
        location: Região da fila
        queue: Nome da fila de dispatch
        worker_url: URL pública do endpoint /worker/dispatch
        service_account_email: Conta de serviço para token OIDC (opcional)
    """

    project_id: str = ""
    location: str = "us-central1"
    queue: str = "saga-relay-dispatch"
    worker_url: str = ""
    service_account_email: str = ""

    def validate(self, gcp_project: str) -> list[str]:
        """Valida configurações do Cloud Tasks.

        Args:
            gcp_project: Projeto GCP padrão.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not (self.project_id or gcp_project):
            errors.append(
                "RELAY_PROCESSING_MODE=queued requer "
                "CLOUD_TASKS_PROJECT_ID ou GCP_PROJECT"
            )

        if not self.location:
            errors.append("CLOUD_TASKS_LOCATION não pode ser vazio")

        if not self.queue:
            errors.append("CLOUD_TASKS_QUEUE não pode ser vazio")

        if not self.worker_url:
            errors.append("CLOUD_TASKS_WORKER_URL não configurado")

        return errors


def _load_cloud_tasks_from_env() -> CloudTasksSettings:
    """Carrega CloudTasksSettings de variáveis de ambiente."""
    return CloudTasksSettings(
        project_id=os.getenv(
            "CLOUD_TASKS_PROJECT_ID",
            os.getenv("GCP_PROJECT", os.getenv("GOOGLE_CLOUD_PROJECT", "")),
        ),
        location=os.getenv("CLOUD_TASKS_LOCATION", "us-central1"),
        queue=os.getenv("CLOUD_TASKS_QUEUE", "saga-relay-dispatch"),
        worker_url=os.getenv("CLOUD_TASKS_WORKER_URL", ""),
        service_account_email=os.getenv("CLOUD_TASKS_SERVICE_ACCOUNT_EMAIL", ""),
    )


@lru_cache(maxsize=1)
def get_cloud_tasks_settings() -> CloudTasksSettings:
    """Retorna instância cacheada de CloudTasksSettings."""
    return _load_cloud_tasks_from_env()
