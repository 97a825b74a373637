"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, carrega a
configuração uma única vez e conecta implementações concretas aos
protocolos.

Uso:
    from app.bootstrap import initialize_app, load_relay_config

    initialize_app()
    config = load_relay_config()
    validate_runtime_settings(config)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    BaseSettings,
    CloudTasksSettings,
    GitHubSettings,
    RelaySettings,
    SlackSettings,
    get_base_settings,
    get_cloud_tasks_settings,
    get_github_settings,
    get_relay_settings,
    get_slack_settings,
)

SERVICE_NAME = "saga_relay"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelayConfig:
    """Configuração completa do processo, somente leitura.

    Construída uma vez no startup e passada por referência ao handler.
    """

    base: BaseSettings
    slack: SlackSettings
    github: GitHubSettings
    relay: RelaySettings
    cloud_tasks: CloudTasksSettings

    def validate(self) -> list[str]:
        errors: list[str] = []
        errors.extend(f"base: {error}" for error in self.base.validate())
        errors.extend(f"slack: {error}" for error in self.slack.validate())
        errors.extend(f"github: {error}" for error in self.github.validate())
        errors.extend(
            f"relay: {error}"
            for error in self.relay.validate(is_development=self.base.is_development)
        )
        if self.relay.processing_mode == "queued":
            gcp_project = os.getenv("GCP_PROJECT", "") or os.getenv("GOOGLE_CLOUD_PROJECT", "")
            errors.extend(
                f"cloud_tasks: {error}" for error in self.cloud_tasks.validate(gcp_project)
            )
        return errors


def load_relay_config() -> RelayConfig:
    """Lê todas as settings do ambiente (cacheadas por módulo)."""
    return RelayConfig(
        base=get_base_settings(),
        slack=get_slack_settings(),
        github=get_github_settings(),
        relay=get_relay_settings(),
        cloud_tasks=get_cloud_tasks_settings(),
    )


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(config: RelayConfig) -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    environment = config.base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors = config.validate()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
