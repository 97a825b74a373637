"""Protocolos e contratos do core da aplicação."""

from .dispatch_client import DispatchClientProtocol
from .handoff import JobHandoffProtocol
from .notifier import NotifierProtocol

__all__ = [
    "DispatchClientProtocol",
    "JobHandoffProtocol",
    "NotifierProtocol",
]
