"""Unidade de trabalho em background (atravessa o handoff como JSON)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.domain.command import ParsedCommand


class RelayJob(BaseModel):
    """Subconjunto do comando necessário para dispatch + notificação."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    response_url: str = Field(..., min_length=1, description="URL de follow-up do Slack.")
    command: str = Field(default="", description="Slash command (ex: /saga).")
    user_name: str = Field(default="", description="Usuário que disparou o comando.")
    args: list[str] = Field(default_factory=list, description="Tokens do texto do comando.")
    correlation_id: str = Field(default="", description="ID de rastreamento do request.")

    @classmethod
    def from_command(cls, command: ParsedCommand, *, correlation_id: str = "") -> RelayJob:
        return cls(
            response_url=command.response_url,
            command=command.command,
            user_name=command.user_name,
            args=list(command.args),
            correlation_id=correlation_id,
        )

    def to_command(self) -> ParsedCommand:
        """Reconstrói o ParsedCommand equivalente (texto = args unidos)."""
        fields = {
            "command": self.command,
            "user_name": self.user_name,
            "response_url": self.response_url,
            "text": " ".join(self.args),
        }
        return ParsedCommand(fields=fields, args=tuple(self.args))
