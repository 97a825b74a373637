"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthenticationError,
    DispatchError,
    NotificationError,
    RelayError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "DispatchError",
    "NotificationError",
    "RelayError",
    "ValidationError",
]
