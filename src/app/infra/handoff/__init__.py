"""Estratégias de handoff entre o ack HTTP e o trabalho em background.

- async: InProcessHandoff (task asyncio supervisionada)
- queued: CloudTasksHandoff (task HTTP para o worker)
- inline: InlineHandoff (desenvolvimento)

CloudTasksHandoff não é re-exportado aqui: o import de google.cloud fica
restrito ao modo queued.
"""

from app.infra.handoff.constants import WORKER_TOKEN_HEADER
from app.infra.handoff.in_process import InProcessHandoff
from app.infra.handoff.inline import InlineHandoff
from app.infra.handoff.runtime_tasks import drain_processing_tasks

__all__ = [
    "WORKER_TOKEN_HEADER",
    "InProcessHandoff",
    "InlineHandoff",
    "drain_processing_tasks",
]
