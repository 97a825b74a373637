"""Testes para os modelos de domínio do relay."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from app.domain import (
    ParsedCommand,
    RelayJob,
    broadcast_notification,
    build_dispatch_request,
    failure_notification,
    split_args,
    success_notification,
    usage_notification,
)
from utils.errors import ValidationError

RESPONSE_URL = "https://hooks.slack.com/commands/T000/1234/abcd"


def _command(text: str, **extra: str) -> ParsedCommand:
    return ParsedCommand.from_fields(
        {
            "command": "/saga",
            "user_name": "alice",
            "response_url": RESPONSE_URL,
            "text": text,
            "team_id": "T000",
            **extra,
        }
    )


class TestSplitArgs:
    """Testes para split_args."""

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_or_absent_text(self, text: str | None) -> None:
        assert split_args(text) == ()

    def test_splits_on_spaces(self) -> None:
        assert split_args("deploy staging fast") == ("deploy", "staging", "fast")

    def test_repeated_spaces_do_not_create_empty_tokens(self) -> None:
        assert split_args("  deploy   staging ") == ("deploy", "staging")

    def test_tokens_pass_through_verbatim(self) -> None:
        assert split_args("tag v1.2.3-RC1 --notes=Fix") == ("tag", "v1.2.3-RC1", "--notes=Fix")


class TestBuildDispatchRequest:
    """Testes para build_dispatch_request."""

    def test_event_type_is_prefix_plus_first_arg(self) -> None:
        request = build_dispatch_request(_command("deploy staging fast"), prefix="saga-")

        assert request.event_type == "saga-deploy"
        assert request.client_payload == {
            "command": "/saga",
            "user_name": "alice",
            "args": ["deploy", "staging", "fast"],
        }

    def test_only_selected_fields_are_forwarded(self) -> None:
        request = build_dispatch_request(_command("tag v1"), prefix="saga-")

        assert "team_id" not in request.client_payload
        assert "response_url" not in request.client_payload

    def test_missing_event_type_raises(self) -> None:
        with pytest.raises(ValidationError, match="missing_event_type"):
            build_dispatch_request(_command(""), prefix="saga-")

    def test_same_command_builds_same_payload(self) -> None:
        first = build_dispatch_request(_command("tag v1.2.3"), prefix="saga-")
        second = build_dispatch_request(_command("tag v1.2.3"), prefix="saga-")

        assert first == second
        assert first.as_payload() == second.as_payload()


class TestRelayJob:
    """Testes para RelayJob."""

    def test_round_trip_through_json_preserves_dispatch_request(self) -> None:
        command = _command("tag v1.2.3")
        job = RelayJob.from_command(command, correlation_id="corr-1")

        restored = RelayJob.model_validate_json(job.model_dump_json())

        assert restored == job
        assert build_dispatch_request(restored.to_command(), prefix="saga-") == (
            build_dispatch_request(command, prefix="saga-")
        )

    def test_response_url_is_required(self) -> None:
        with pytest.raises(PydanticValidationError):
            RelayJob(response_url="")


class TestNotifications:
    """Testes para as mensagens de resultado."""

    def test_success_names_event_type(self) -> None:
        notification = success_notification("saga-tag")

        assert "saga-tag" in notification.text
        assert notification.as_payload() == {
            "response_type": "ephemeral",
            "text": notification.text,
        }

    def test_failure_points_to_logs(self) -> None:
        assert "See logs" in failure_notification().text

    def test_usage_mentions_command(self) -> None:
        assert "/deploybot" in usage_notification("/deploybot").text

    @pytest.mark.parametrize(
        ("event_name", "expected"),
        [
            ("tag", "@alice tagged a new release"),
            ("deploy", "@alice triggered a deployment"),
            ("rollback", "@alice triggered `saga-rollback`"),
        ],
    )
    def test_broadcast_describes_action_class(self, event_name: str, expected: str) -> None:
        notification = broadcast_notification(
            user_name="alice",
            event_name=event_name,
            event_type=f"saga-{event_name}",
            channel="#releases",
        )

        assert notification.text == expected
        assert notification.as_payload()["response_type"] == "in_channel"
        assert notification.as_payload()["channel"] == "#releases"
