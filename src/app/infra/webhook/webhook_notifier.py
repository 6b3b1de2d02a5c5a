"""Entrega de notificacoes de agendamento para o webhook configurado.

Uma unica tentativa, com timeout: o chamador decide o que fazer com a
falha (o booking apenas registra em log).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from app.observability import CORRELATION_HEADER, get_correlation_id
from app.protocols.notification_sink import NotificationSinkProtocol
from utils.errors import NotificationFailedError

logger = logging.getLogger(__name__)

_COMPONENT = "webhook_notifier"


@dataclass
class WebhookNotifierConfig:
    """Configuracao do cliente HTTP do webhook."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class WebhookNotifier(NotificationSinkProtocol):
    """POST JSON via httpx; status >= 400 ou erro de rede viram NotificationFailedError."""

    def __init__(
        self,
        config: WebhookNotifierConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or WebhookNotifierConfig()
        self._transport = transport

    async def post(self, url: str, payload: dict[str, Any]) -> None:
        headers = {**self._config.default_headers}
        correlation_id = get_correlation_id()
        if correlation_id:
            headers[CORRELATION_HEADER] = correlation_id
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    url,
                    json=payload,
                    headers=headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.HTTPError as exc:
            raise NotificationFailedError("webhook_connection_error") from exc
        if response.status_code >= 400:
            raise NotificationFailedError(f"webhook_status_{response.status_code}")
        logger.info(
            "webhook_delivered",
            extra={
                "component": _COMPONENT,
                "action": "post",
                "result": "ok",
                "status_code": response.status_code,
            },
        )


__all__ = ["WebhookNotifier", "WebhookNotifierConfig"]
