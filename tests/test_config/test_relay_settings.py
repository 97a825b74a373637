"""Testes para config/settings do relay.

Valida valores padrão, imutabilidade, leitura do ambiente e validate().
"""

from collections.abc import Iterator

import pytest

from config.settings import (
    BaseSettings,
    CloudTasksSettings,
    GitHubSettings,
    RelaySettings,
    SlackSettings,
    get_base_settings,
    get_cloud_tasks_settings,
    get_github_settings,
    get_relay_settings,
    get_slack_settings,
)

_CACHED_GETTERS = (
    get_base_settings,
    get_cloud_tasks_settings,
    get_github_settings,
    get_relay_settings,
    get_slack_settings,
)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
    yield
    for getter in _CACHED_GETTERS:
        getter.cache_clear()


class TestSlackSettings:
    """Testes para SlackSettings."""

    def test_default_values(self) -> None:
        settings = SlackSettings()

        assert settings.signing_secret == ""
        assert settings.timestamp_tolerance_seconds == 300
        assert settings.broadcast_enabled is False

    def test_immutable(self) -> None:
        """Valida que dataclass é imutável (frozen=True)."""
        settings = SlackSettings()

        with pytest.raises(AttributeError):
            settings.signing_secret = "outro"  # type: ignore[misc]

    def test_validate_requires_signing_secret(self) -> None:
        assert "SLACK_SIGNING_SECRET não configurado" in SlackSettings().validate()
        assert SlackSettings(signing_secret="s").validate() == []

    def test_validate_broadcast_requires_channel(self) -> None:
        errors = SlackSettings(signing_secret="s", broadcast_enabled=True).validate()

        assert len(errors) == 1

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SLACK_SIGNING_SECRET", "env-secret")
        monkeypatch.setenv("SLACK_TIMESTAMP_TOLERANCE_SECONDS", "120")
        monkeypatch.setenv("SLACK_BROADCAST_ENABLED", "true")
        monkeypatch.setenv("SLACK_BROADCAST_CHANNEL", "#releases")

        settings = get_slack_settings()

        assert settings.signing_secret == "env-secret"
        assert settings.timestamp_tolerance_seconds == 120
        assert settings.broadcast_enabled is True
        assert settings.broadcast_channel == "#releases"
        assert get_slack_settings() is settings


class TestGitHubSettings:
    """Testes para GitHubSettings."""

    def test_dispatches_endpoint(self) -> None:
        settings = GitHubSettings(owner="acme", repo="infra")

        assert settings.dispatches_endpoint == "https://api.github.com/repos/acme/infra/dispatches"

    def test_dispatches_endpoint_strips_trailing_slash(self) -> None:
        settings = GitHubSettings(
            owner="acme",
            repo="infra",
            api_base_url="https://ghe.acme.com/api/v3/",
        )

        assert settings.dispatches_endpoint == (
            "https://ghe.acme.com/api/v3/repos/acme/infra/dispatches"
        )

    def test_validate_lists_missing_fields(self) -> None:
        errors = GitHubSettings().validate()

        assert errors == [
            "GITHUB_TOKEN não configurado",
            "GITHUB_OWNER não configurado",
            "GITHUB_REPO não configurado",
        ]

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_env")
        monkeypatch.setenv("GITHUB_OWNER", "acme")
        monkeypatch.setenv("GITHUB_REPO", "infra")
        monkeypatch.setenv("GITHUB_EVENT_PREFIX", "ops-")

        settings = get_github_settings()

        assert settings.token == "ghp_env"
        assert settings.event_prefix == "ops-"
        assert settings.validate() == []


class TestRelaySettings:
    """Testes para RelaySettings."""

    def test_default_values(self) -> None:
        settings = RelaySettings()

        assert settings.processing_mode == "async"
        assert settings.body_encoding == "base64"
        assert settings.validate_before_ack is True
        assert settings.drain_timeout_seconds == 30.0
        assert settings.ack_text

    @pytest.mark.parametrize("mode", ["async", "queued", "inline"])
    def test_valid_modes_in_development(self, mode: str) -> None:
        settings = RelaySettings(processing_mode=mode, worker_token="t")  # type: ignore[arg-type]

        assert settings.validate(is_development=True) == []

    def test_inline_forbidden_outside_development(self) -> None:
        errors = RelaySettings(processing_mode="inline").validate(is_development=False)

        assert errors == ["RELAY_PROCESSING_MODE=inline proibido em staging/production"]

    def test_queued_requires_worker_token(self) -> None:
        errors = RelaySettings(processing_mode="queued").validate(is_development=True)

        assert errors == ["RELAY_PROCESSING_MODE=queued requer RELAY_WORKER_TOKEN"]

    def test_invalid_values(self) -> None:
        settings = RelaySettings(
            processing_mode="sync",  # type: ignore[arg-type]
            body_encoding="gzip",  # type: ignore[arg-type]
            drain_timeout_seconds=-1,
        )

        assert len(settings.validate(is_development=True)) == 3

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RELAY_PROCESSING_MODE", "QUEUED")
        monkeypatch.setenv("RELAY_BODY_ENCODING", "identity")
        monkeypatch.setenv("RELAY_VALIDATE_BEFORE_ACK", "false")
        monkeypatch.setenv("RELAY_WORKER_TOKEN", "worker-env")
        monkeypatch.setenv("RELAY_DRAIN_TIMEOUT_SECONDS", "5")

        settings = get_relay_settings()

        assert settings.processing_mode == "queued"
        assert settings.body_encoding == "identity"
        assert settings.validate_before_ack is False
        assert settings.worker_token == "worker-env"
        assert settings.drain_timeout_seconds == 5.0


class TestCloudTasksSettings:
    """Testes para CloudTasksSettings."""

    def test_validate_accepts_gcp_project_fallback(self) -> None:
        settings = CloudTasksSettings(worker_url="https://relay.example.com/worker/dispatch")

        assert settings.validate(gcp_project="acme-prod") == []
        assert len(settings.validate(gcp_project="")) == 1

    def test_validate_requires_worker_url(self) -> None:
        errors = CloudTasksSettings(project_id="acme-prod").validate(gcp_project="")

        assert errors == ["CLOUD_TASKS_WORKER_URL não configurado"]

    def test_load_from_env_falls_back_to_gcp_project(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.delenv("CLOUD_TASKS_PROJECT_ID", raising=False)
        monkeypatch.setenv("GCP_PROJECT", "acme-gcp")
        monkeypatch.setenv("CLOUD_TASKS_QUEUE", "relay-q")

        settings = get_cloud_tasks_settings()

        assert settings.project_id == "acme-gcp"
        assert settings.queue == "relay-q"
        assert settings.location == "us-central1"


class TestBaseSettings:
    """Testes para BaseSettings."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGE", "staging"), ("qualquer", "development")],
    )
    def test_environment_aliases(
        self,
        monkeypatch: pytest.MonkeyPatch,
        raw: str,
        expected: str,
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)

        assert get_base_settings().environment == expected

    def test_flags(self) -> None:
        assert BaseSettings(environment="production").is_production is True
        assert BaseSettings().is_development is True
