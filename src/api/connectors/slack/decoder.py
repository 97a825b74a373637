"""Decodificação do body do slash command.

Body = codificação de transporte (base64 por padrão) sobre um payload
application/x-www-form-urlencoded.
"""

from __future__ import annotations

import base64
import binascii
from typing import TYPE_CHECKING
from urllib.parse import parse_qsl, urlencode

from app.domain import ParsedCommand
from utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings import BodyEncoding


def decode_command_body(raw_body: bytes, encoding: BodyEncoding = "base64") -> ParsedCommand:
    """Converte o body bruto em ParsedCommand (transporte + form, sem regras).

    Raises:
        ValidationError: Base64 ou UTF-8 inválido.
    """
    form = _decode_transport(raw_body, encoding)
    return ParsedCommand.from_fields(dict(parse_qsl(form, keep_blank_values=True)))


def validate_command(command: ParsedCommand) -> ParsedCommand:
    """Exige os campos sem os quais nenhum resultado pode ser entregue.

    Raises:
        ValidationError: Form vazio ou sem response_url.
    """
    if not command.fields:
        raise ValidationError("empty_payload")
    if not command.response_url:
        raise ValidationError("missing_response_url")
    return command


def encode_command_body(fields: Mapping[str, str], encoding: BodyEncoding = "base64") -> bytes:
    """Inverso de decode_command_body (usado em testes e no script de smoke)."""
    form = urlencode(dict(fields)).encode("utf-8")
    if encoding == "base64":
        return base64.b64encode(form)
    return form


def _decode_transport(raw_body: bytes, encoding: BodyEncoding) -> str:
    try:
        if encoding == "base64":
            raw = base64.b64decode(raw_body, validate=True)
        else:
            raw = raw_body
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValidationError("invalid_body_encoding") from exc
