"""Settings do webhook de notificacao de agendamentos."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class WebhookSettings:
    """Configurações do webhook.

    Attributes:
        url: URL inicial do webhook (o painel pode sobrescrever)
        timeout_seconds: Timeout de cada entrega, sem retry
    """

    url: str = ""
    timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.timeout_seconds <= 0:
            errors.append("WEBHOOK_TIMEOUT_SECONDS deve ser > 0")
        if self.url and not self.url.startswith(("http://", "https://")):
            errors.append("WEBHOOK_URL deve usar http(s)")
        return errors


def _load_webhook_from_env() -> WebhookSettings:
    """Carrega WebhookSettings de variáveis de ambiente."""
    return WebhookSettings(
        url=os.getenv("WEBHOOK_URL", "").strip(),
        timeout_seconds=float(os.getenv("WEBHOOK_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_webhook_settings() -> WebhookSettings:
    """Retorna instância cacheada de WebhookSettings."""
    return _load_webhook_from_env()


__all__ = ["WebhookSettings", "get_webhook_settings"]
