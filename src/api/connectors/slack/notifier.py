"""Envio de follow-ups para o response_url do Slack."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.http_base import HttpClient, HttpError
from utils.errors import NotificationError

if TYPE_CHECKING:
    from app.domain import OutcomeNotification


class SlackResponseNotifier:
    """POST JSON {response_type, text, channel?} no URL informado."""

    def __init__(self, http_client: HttpClient | None = None) -> None:
        self._http = http_client or HttpClient()

    async def notify(self, url: str, notification: OutcomeNotification) -> None:
        if not url:
            raise NotificationError("missing_response_url")
        try:
            await self._http.post(url, json=notification.as_payload())
        except HttpError as exc:
            raise NotificationError(
                "slack_notification_failed", status_code=exc.status_code
            ) from exc
