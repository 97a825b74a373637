"""Cliente do repository_dispatch do GitHub.

POST /repos/{owner}/{repo}/dispatches
Body: {"event_type": "...", "client_payload": {...}}
Resposta esperada: 204 No Content.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.http_base import HttpClient, HttpError
from config.settings import GITHUB_API_VERSION
from utils.errors import DispatchError

if TYPE_CHECKING:
    from app.domain import DispatchRequest
    from config.settings import GitHubSettings

logger = logging.getLogger(__name__)


class GitHubDispatchClient:
    """Uma chamada autenticada por evento, sem retry."""

    def __init__(self, settings: GitHubSettings, http_client: HttpClient | None = None) -> None:
        self._settings = settings
        self._http = http_client or HttpClient()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    async def create_dispatch_event(self, request: DispatchRequest) -> None:
        """Cria o evento de dispatch.

        Raises:
            DispatchError: Token ausente, falha de rede ou status fora de 2xx.
        """
        if not self._settings.token:
            raise DispatchError("github_token_not_configured")

        try:
            response = await self._http.post(
                self._settings.dispatches_endpoint,
                json=request.as_payload(),
                headers=self._headers(),
            )
        except HttpError as exc:
            raise DispatchError("github_dispatch_failed", status_code=exc.status_code) from exc

        logger.info(
            "github_dispatch_created",
            extra={
                "event_type": request.event_type,
                "owner": self._settings.owner,
                "repo": self._settings.repo,
                "status_code": response.status_code,
            },
        )
