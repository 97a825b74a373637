"""Agregador de settings de infraestrutura GCP.

Re-exporta todas as settings de infraestrutura para uso externo.
"""

from __future__ import annotations

from config.settings.infra.cloud_tasks import (
    CloudTasksSettings,
    get_cloud_tasks_settings,
)

__all__ = [
    "CloudTasksSettings",
    "get_cloud_tasks_settings",
]
