"""Controle de tasks assíncronas do relay (handoff em processo).

Cada task fica registrada até terminar, para que o shutdown possa esperar
por ela. Task cancelada no shutdown = notificação perdida (logada).
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)

TASK_NAME_PREFIX = "relay:"

_TASK_SEMAPHORE = asyncio.Semaphore(100)
_active_tasks: set[asyncio.Task[Any]] = set()


def schedule_processing_task(
    *,
    correlation_id: str,
    coroutine: Coroutine[Any, Any, Any],
) -> int:
    """Agenda task assíncrona com limite de concorrência.

    Returns:
        Quantidade de tasks ativas após o agendamento.
    """
    task = asyncio.create_task(
        _run_with_limit(coroutine),
        name=f"{TASK_NAME_PREFIX}{correlation_id}",
    )
    _active_tasks.add(task)
    task.add_done_callback(_on_processing_task_done)
    logger.info(
        "relay_processing_scheduled",
        extra={
            "correlation_id": correlation_id,
            "mode": "async",
            "active_tasks": len(_active_tasks),
        },
    )
    return len(_active_tasks)


def active_task_count() -> int:
    return len(_active_tasks)


async def _run_with_limit(coroutine: Coroutine[Any, Any, Any]) -> None:
    async with _TASK_SEMAPHORE:
        await coroutine


def _correlation_id_of(task: asyncio.Task[Any]) -> str:
    return task.get_name().removeprefix(TASK_NAME_PREFIX)


def _on_processing_task_done(task: asyncio.Task[Any]) -> None:
    _active_tasks.discard(task)
    with contextlib.suppress(asyncio.CancelledError):
        exc = task.exception()
        if exc is not None:
            logger.error(
                "relay_processing_task_failed",
                extra={
                    "correlation_id": _correlation_id_of(task),
                    "error_type": type(exc).__name__,
                    "active_tasks": len(_active_tasks),
                },
            )


async def drain_processing_tasks(timeout_seconds: float = 30.0) -> int:
    """Aguarda tasks pendentes durante shutdown do processo.

    Returns:
        Quantidade de tasks canceladas (notificações perdidas).
    """
    if not _active_tasks:
        return 0

    pending_now = list(_active_tasks)
    logger.info(
        "relay_processing_shutdown_wait",
        extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
    )
    _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
    if not pending:
        return 0

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    for task in pending:
        logger.warning(
            "relay_notification_lost",
            extra={"correlation_id": _correlation_id_of(task), "reason": "shutdown"},
        )
    logger.warning(
        "relay_processing_shutdown_cancelled",
        extra={"cancelled_tasks": len(pending)},
    )
    return len(pending)
