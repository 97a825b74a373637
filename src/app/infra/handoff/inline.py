"""Handoff inline: executa antes de responder (somente desenvolvimento)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain import RelayJob
    from app.use_cases.relay_command import RelayCommandUseCase

logger = logging.getLogger(__name__)


class InlineHandoff:
    def __init__(self, use_case: RelayCommandUseCase) -> None:
        self._use_case = use_case

    async def submit(self, job: RelayJob) -> None:
        outcome = await self._use_case.execute(job)
        logger.info(
            "relay_processing_completed",
            extra={
                "correlation_id": job.correlation_id,
                "mode": "inline",
                "outcome": outcome.value,
            },
        )
