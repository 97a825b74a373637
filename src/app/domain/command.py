"""Modelos de domínio do slash command.

ParsedCommand -> DispatchRequest -> OutcomeNotification. Nada aqui faz IO;
tudo é criado e descartado dentro de uma única invocação.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from utils.errors import ValidationError

ResponseType = Literal["ephemeral", "in_channel"]

# Campos do payload do Slack repassados no client_payload
CLIENT_PAYLOAD_FIELDS = ("command", "user_name")

SUCCESS_TEMPLATE = "On it! Dispatched `{event_type}`."
FAILURE_TEXT = "❌ Failed to trigger GitHub Actions. See logs."
USAGE_TEXT = "❌ Missing event name. Usage: `{command} <event> [args...]`"

# Classe de ação anunciada no broadcast, por nome de evento
ACTION_DESCRIPTIONS = {
    "tag": "tagged a new release",
    "deploy": "triggered a deployment",
}


def split_args(text: str | None) -> tuple[str, ...]:
    """Divide o texto do comando em tokens separados por espaço.

    Texto vazio ou ausente gera sequência vazia. Espaços repetidos não
    geram tokens vazios; os demais tokens passam sem alteração.
    """
    if not text:
        return ()
    return tuple(token for token in text.split(" ") if token)


@dataclass(frozen=True)
class ParsedCommand:
    """Payload form-encoded do Slack já decodificado.

    Attributes:
        fields: Mapa plano str -> str (command, text, user_name, response_url...)
        args: Tokens derivados de fields["text"]
    """

    fields: Mapping[str, str]
    args: tuple[str, ...] = ()

    @classmethod
    def from_fields(cls, fields: Mapping[str, str]) -> ParsedCommand:
        return cls(fields=dict(fields), args=split_args(fields.get("text")))

    @property
    def command(self) -> str:
        return self.fields.get("command", "")

    @property
    def user_name(self) -> str:
        return self.fields.get("user_name", "")

    @property
    def response_url(self) -> str:
        return self.fields.get("response_url", "")

    @property
    def event_name(self) -> str | None:
        """Primeiro argumento (define o tipo de evento) ou None."""
        return self.args[0] if self.args else None


@dataclass(frozen=True)
class DispatchRequest:
    """Evento repository_dispatch pronto para envio."""

    event_type: str
    client_payload: dict[str, Any] = field(default_factory=dict)

    def as_payload(self) -> dict[str, Any]:
        return {"event_type": self.event_type, "client_payload": self.client_payload}


def build_dispatch_request(command: ParsedCommand, *, prefix: str) -> DispatchRequest:
    """Monta o DispatchRequest a partir do comando.

    Args:
        command: Comando decodificado.
        prefix: Prefixo do event_type (ex: "saga-").

    Raises:
        ValidationError: Se o comando não tiver argumentos (evento indefinido).
    """
    if command.event_name is None:
        raise ValidationError("missing_event_type")

    client_payload: dict[str, Any] = {
        key: command.fields[key] for key in CLIENT_PAYLOAD_FIELDS if key in command.fields
    }
    client_payload["args"] = list(command.args)
    return DispatchRequest(
        event_type=f"{prefix}{command.event_name}",
        client_payload=client_payload,
    )


@dataclass(frozen=True)
class OutcomeNotification:
    """Mensagem curta enviada ao response_url (ou ao destino de broadcast)."""

    text: str
    response_type: ResponseType = "ephemeral"
    channel: str | None = None

    def as_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"response_type": self.response_type, "text": self.text}
        if self.channel:
            payload["channel"] = self.channel
        return payload


def success_notification(event_type: str) -> OutcomeNotification:
    return OutcomeNotification(text=SUCCESS_TEMPLATE.format(event_type=event_type))


def failure_notification() -> OutcomeNotification:
    return OutcomeNotification(text=FAILURE_TEXT)


def usage_notification(command: str) -> OutcomeNotification:
    return OutcomeNotification(text=USAGE_TEXT.format(command=command or "/saga"))


def broadcast_notification(
    *,
    user_name: str,
    event_name: str,
    event_type: str,
    channel: str,
) -> OutcomeNotification:
    """Anúncio in_channel de quem disparou qual classe de ação."""
    action = ACTION_DESCRIPTIONS.get(event_name, f"triggered `{event_type}`")
    who = f"@{user_name}" if user_name else "Someone"
    return OutcomeNotification(
        text=f"{who} {action}",
        response_type="in_channel",
        channel=channel,
    )
