"""Contrato do destino de notificacoes de agendamento (webhook)."""

from __future__ import annotations

from typing import Any, Protocol


class NotificationSinkProtocol(Protocol):
    """Entrega payload JSON a uma URL; falhas levantam NotificationFailedError."""

    async def post(self, url: str, payload: dict[str, Any]) -> None: ...
