"""Connector Slack: assinatura, decodificação e follow-ups."""

from api.connectors.slack.decoder import (
    decode_command_body,
    encode_command_body,
    validate_command,
)
from api.connectors.slack.notifier import SlackResponseNotifier
from api.connectors.slack.signature import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    compute_slack_signature,
    verify_slack_signature,
)

__all__ = [
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
    "SlackResponseNotifier",
    "compute_slack_signature",
    "decode_command_body",
    "encode_command_body",
    "validate_command",
    "verify_slack_signature",
]
