"""Protocolo do handoff entre o ack e o trabalho em background."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain import RelayJob


class JobHandoffProtocol(Protocol):
    """Entrega um RelayJob para execução desacoplada da resposta HTTP."""

    async def submit(self, job: RelayJob) -> None: ...
