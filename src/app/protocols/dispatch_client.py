"""Protocolo do cliente de dispatch.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain import DispatchRequest


class DispatchClientProtocol(Protocol):
    """Contrato mínimo para criar um evento repository_dispatch.

    Implementações levantam DispatchError em qualquer falha.
    """

    async def create_dispatch_event(self, request: DispatchRequest) -> None: ...
