"""Testes para decodificação do body do slash command."""

from __future__ import annotations

import base64

import pytest

from api.connectors.slack.decoder import (
    decode_command_body,
    encode_command_body,
    validate_command,
)
from utils.errors import ValidationError

RESPONSE_URL = "https://hooks.slack.com/commands/T000/1234/abcd"


@pytest.mark.parametrize(
    "fields",
    [
        {},
        {"a": "b"},
        {"text": "deploy x", "user_name": "u"},
        {"response_url": RESPONSE_URL},
        {"response_url": RESPONSE_URL, "text": "", "command": "/saga"},
        {
            "response_url": RESPONSE_URL,
            "text": "deploy staging --force a&b=c",
            "user_name": "joão.silva",
        },
        {"response_url": RESPONSE_URL, "text": "+ 100% ünïcode ✓"},
    ],
)
def test_decode_is_left_inverse_of_encode(fields: dict[str, str]) -> None:
    for encoding in ("base64", "identity"):
        command = decode_command_body(encode_command_body(fields, encoding), encoding)

        assert dict(command.fields) == fields


def test_decode_base64_form_body() -> None:
    form = f"command=%2Fsaga&text=tag+v1.2.3&user_name=alice&response_url={RESPONSE_URL}"
    raw_body = base64.b64encode(form.encode())

    command = decode_command_body(raw_body)

    assert command.command == "/saga"
    assert command.user_name == "alice"
    assert command.response_url == RESPONSE_URL
    assert command.args == ("tag", "v1.2.3")
    assert command.event_name == "tag"


def test_decode_splits_text_into_args() -> None:
    body = encode_command_body({"response_url": RESPONSE_URL, "text": "deploy staging fast"})

    command = decode_command_body(body)

    assert command.args == ("deploy", "staging", "fast")
    assert command.event_name == "deploy"


@pytest.mark.parametrize("fields", [{"text": ""}, {}])
def test_empty_or_missing_text_yields_no_args(fields: dict[str, str]) -> None:
    body = encode_command_body({"response_url": RESPONSE_URL, **fields})

    command = decode_command_body(body)

    assert command.args == ()
    assert command.event_name is None


def test_invalid_base64_raises_validation_error() -> None:
    with pytest.raises(ValidationError, match="invalid_body_encoding"):
        decode_command_body(b"not base64!!")


def test_invalid_utf8_raises_validation_error() -> None:
    with pytest.raises(ValidationError, match="invalid_body_encoding"):
        decode_command_body(base64.b64encode(b"\xff\xfe\xfa"))


def test_empty_body_decodes_to_empty_command() -> None:
    command = decode_command_body(b"")

    assert dict(command.fields) == {}
    assert command.args == ()


class TestValidateCommand:
    """Campos obrigatórios checados depois da decodificação."""

    def test_empty_form_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="empty_payload"):
            validate_command(decode_command_body(b""))

    @pytest.mark.parametrize("response_url", [None, ""])
    def test_missing_response_url_is_rejected(self, response_url: str | None) -> None:
        fields = {"command": "/saga", "text": "tag v1"}
        if response_url is not None:
            fields["response_url"] = response_url

        with pytest.raises(ValidationError, match="missing_response_url"):
            validate_command(decode_command_body(encode_command_body(fields)))

    def test_complete_command_is_returned_unchanged(self) -> None:
        command = decode_command_body(
            encode_command_body({"response_url": RESPONSE_URL, "text": "tag v1"})
        )

        assert validate_command(command) is command
