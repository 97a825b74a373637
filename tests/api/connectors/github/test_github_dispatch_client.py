"""Testes para GitHubDispatchClient."""

from __future__ import annotations

import json

import httpx
import pytest

from api.connectors.github import GitHubDispatchClient
from api.connectors.http_base import HttpClient
from app.domain import DispatchRequest
from config.settings import GitHubSettings
from utils.errors import DispatchError

SETTINGS = GitHubSettings(token="ghp_test", owner="acme", repo="infra")
REQUEST = DispatchRequest(
    event_type="saga-tag",
    client_payload={"command": "/saga", "user_name": "alice", "args": ["tag", "v1.2.3"]},
)


def _client(handler, settings: GitHubSettings = SETTINGS) -> GitHubDispatchClient:
    return GitHubDispatchClient(settings, HttpClient(transport=httpx.MockTransport(handler)))


@pytest.mark.asyncio
async def test_create_dispatch_event_posts_to_repository_dispatches() -> None:
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(204)

    await _client(handler).create_dispatch_event(REQUEST)

    assert len(captured) == 1
    request = captured[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.github.com/repos/acme/infra/dispatches"
    assert request.headers["Authorization"] == "Bearer ghp_test"
    assert request.headers["Accept"] == "application/vnd.github+json"
    assert json.loads(request.content) == {
        "event_type": "saga-tag",
        "client_payload": {
            "command": "/saga",
            "user_name": "alice",
            "args": ["tag", "v1.2.3"],
        },
    }


@pytest.mark.asyncio
async def test_custom_api_base_url_is_used() -> None:
    captured: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(str(request.url))
        return httpx.Response(204)

    settings = GitHubSettings(
        token="t", owner="acme", repo="infra", api_base_url="https://ghe.acme.io/api/v3/"
    )
    await _client(handler, settings).create_dispatch_event(REQUEST)

    assert captured == ["https://ghe.acme.io/api/v3/repos/acme/infra/dispatches"]


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [401, 404, 422, 500])
async def test_non_2xx_raises_dispatch_error_without_retry(status_code: int) -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(status_code, json={"message": "nope"})

    with pytest.raises(DispatchError) as exc_info:
        await _client(handler).create_dispatch_event(REQUEST)

    assert exc_info.value.status_code == status_code
    assert calls == 1


@pytest.mark.asyncio
async def test_network_error_raises_dispatch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timeout", request=request)

    with pytest.raises(DispatchError, match="github_dispatch_failed"):
        await _client(handler).create_dispatch_event(REQUEST)


@pytest.mark.asyncio
async def test_missing_token_raises_before_any_call() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(204)

    settings = GitHubSettings(token="", owner="acme", repo="infra")

    with pytest.raises(DispatchError, match="github_token_not_configured"):
        await _client(handler, settings).create_dispatch_event(REQUEST)
    assert calls == 0
