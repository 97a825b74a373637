"""Modelos de domínio do relay (sem IO)."""

from app.domain.command import (
    DispatchRequest,
    OutcomeNotification,
    ParsedCommand,
    broadcast_notification,
    build_dispatch_request,
    failure_notification,
    split_args,
    success_notification,
    usage_notification,
)
from app.domain.relay_job import RelayJob

__all__ = [
    "DispatchRequest",
    "OutcomeNotification",
    "ParsedCommand",
    "RelayJob",
    "broadcast_notification",
    "build_dispatch_request",
    "failure_notification",
    "split_args",
    "success_notification",
    "usage_notification",
]
