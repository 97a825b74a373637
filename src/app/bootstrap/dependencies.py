"""Factories de dependências do relay.

Conecta os connectors concretos (api/connectors) aos protocolos usados
pelo use case e escolhe a estratégia de handoff conforme a configuração.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.connectors.github import GitHubDispatchClient
from api.connectors.http_base import HttpClient
from api.connectors.slack import SlackResponseNotifier
from app.infra.handoff import InlineHandoff, InProcessHandoff
from app.use_cases.relay_command import RelayCommandUseCase

if TYPE_CHECKING:
    from app.bootstrap import RelayConfig
    from app.protocols import DispatchClientProtocol, JobHandoffProtocol, NotifierProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelayContainer:
    """Objetos do relay montados no startup (app.state.relay)."""

    config: RelayConfig
    use_case: RelayCommandUseCase
    handoff: JobHandoffProtocol


def create_dispatch_client(
    config: RelayConfig,
    http_client: HttpClient | None = None,
) -> GitHubDispatchClient:
    return GitHubDispatchClient(config.github, http_client=http_client)


def create_notifier(http_client: HttpClient | None = None) -> SlackResponseNotifier:
    return SlackResponseNotifier(http_client=http_client)


def create_relay_use_case(
    config: RelayConfig,
    *,
    dispatch_client: DispatchClientProtocol | None = None,
    notifier: NotifierProtocol | None = None,
) -> RelayCommandUseCase:
    return RelayCommandUseCase(
        dispatch_client=dispatch_client or create_dispatch_client(config),
        notifier=notifier or create_notifier(),
        event_prefix=config.github.event_prefix,
        slack_settings=config.slack,
    )


def create_handoff(
    config: RelayConfig,
    use_case: RelayCommandUseCase,
) -> JobHandoffProtocol:
    """Escolhe a estratégia de handoff (async|queued|inline)."""
    mode = config.relay.processing_mode
    if mode == "queued":
        from app.infra.handoff.cloud_tasks import CloudTasksHandoff

        return CloudTasksHandoff(config.cloud_tasks, worker_token=config.relay.worker_token)
    if mode == "inline":
        return InlineHandoff(use_case)
    return InProcessHandoff(use_case)


def create_relay_container(
    config: RelayConfig,
    *,
    dispatch_client: DispatchClientProtocol | None = None,
    notifier: NotifierProtocol | None = None,
    handoff: JobHandoffProtocol | None = None,
) -> RelayContainer:
    use_case = create_relay_use_case(
        config,
        dispatch_client=dispatch_client,
        notifier=notifier,
    )
    container = RelayContainer(
        config=config,
        use_case=use_case,
        handoff=handoff or create_handoff(config, use_case),
    )
    logger.info(
        "relay_container_ready",
        extra={
            "component": "bootstrap",
            "processing_mode": config.relay.processing_mode,
            "handoff": type(container.handoff).__name__,
        },
    )
    return container
