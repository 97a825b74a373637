"""Handoff em processo: fire-and-forget supervisionado (task asyncio)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.infra.handoff.runtime_tasks import schedule_processing_task

if TYPE_CHECKING:
    from app.domain import RelayJob
    from app.use_cases.relay_command import RelayCommandUseCase


class InProcessHandoff:
    """Agenda o use case como task e retorna sem aguardar.

    A task sobrevive à resposta HTTP enquanto o processo estiver vivo; o
    lifespan da aplicação drena as tasks pendentes no shutdown.
    """

    def __init__(self, use_case: RelayCommandUseCase) -> None:
        self._use_case = use_case

    async def submit(self, job: RelayJob) -> None:
        schedule_processing_task(
            correlation_id=job.correlation_id,
            coroutine=self._use_case.execute(job),
        )
