"""Testes do endpoint de health."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check
from tests.fakes.fake_relay import make_config


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/health",
        "raw_path": b"/health",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_reports_unknown_mode_before_startup() -> None:
    response = await health_check(_build_request_with_state(SimpleNamespace(relay=None)))

    assert response.status == "healthy"
    assert response.service == "saga-relay"
    assert response.processing_mode == "unknown"


@pytest.mark.asyncio
async def test_health_reports_configured_processing_mode() -> None:
    relay = SimpleNamespace(config=make_config(processing_mode="queued"))

    response = await health_check(_build_request_with_state(SimpleNamespace(relay=relay)))

    assert response.processing_mode == "queued"
    assert response.timestamp
