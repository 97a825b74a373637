"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """POST JSON com uma única tentativa e o timeout padrão do httpx.

    Qualquer falha de transporte ou status fora de 2xx vira HttpError.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(url, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("http_connection_error", extra={"error_type": type(exc).__name__})
            raise HttpError("http_connection_error") from exc

        if not response.is_success:
            raise HttpError("http_error_status", status_code=response.status_code)
        return response
