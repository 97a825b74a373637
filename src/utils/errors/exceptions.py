"""Taxonomia de erros do relay.

Cada classe mapeia para uma única reação do handler:
- AuthenticationError: 401, sem notificação
- ValidationError: 400 antes do ack (ou mensagem de uso no background)
- DispatchError: notificação de falha ao chamador
- NotificationError: apenas log
"""

from __future__ import annotations


class RelayError(Exception):
    """Base para falhas do relay (mensagens sem PII nem segredos)."""


class AuthenticationError(RelayError):
    """Assinatura ausente, inválida ou expirada.

    O motivo detalhado fica apenas nos logs; o chamador recebe 401 genérico.
    """


class ValidationError(RelayError):
    """Payload malformado ou comando sem tipo de evento."""


class DispatchError(RelayError):
    """Falha na chamada de dispatch ao GitHub."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotificationError(RelayError):
    """Falha ao enviar a mensagem de follow-up para o Slack."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
