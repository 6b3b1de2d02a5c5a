"""Leitura e atualizacao da configuracao de runtime (webhook e OAuth)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.runtime_config import OAuthClientCredentials, RuntimeConfig
from utils.errors import BookingValidationError

if TYPE_CHECKING:
    from app.domain.advisor import Advisor
    from app.protocols.advisor_store import ConfigStoreProtocol

logger = logging.getLogger(__name__)


class RuntimeConfigService:
    """Mescla o documento salvo com os defaults vindos do ambiente."""

    def __init__(
        self,
        *,
        config_store: ConfigStoreProtocol,
        defaults: RuntimeConfig,
        base_url: str,
    ) -> None:
        self._config_store = config_store
        self._defaults = defaults
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def default_redirect_uri(self) -> str:
        return f"{self._base_url}/auth/callback"

    async def get(self) -> RuntimeConfig:
        stored = await self._config_store.load()
        return stored if stored is not None else self._defaults.model_copy(deep=True)

    async def advisor_credentials(self, advisor: Advisor) -> dict[str, Any]:
        """Tokens do consultor com o client OAuth configurado agora.

        O registro guarda o client da epoca da conexao; trocar o client pelo
        painel nao pode quebrar o refresh de quem ja esta conectado.
        """
        credentials = dict(advisor.credentials or {})
        config = await self.get()
        if config.oauth is not None:
            credentials["client_id"] = config.oauth.client_id
            credentials["client_secret"] = config.oauth.client_secret
        return credentials

    async def describe(self) -> dict[str, Any]:
        """Resumo sem segredos para o painel de administracao."""
        config = await self.get()
        return {
            "webhookUrl": config.webhook_url,
            "hasCredentials": config.has_credentials,
            "baseUrl": self._base_url,
        }

    async def set_credentials(
        self,
        *,
        client_id: str,
        client_secret: str,
        redirect_uri: str | None = None,
    ) -> RuntimeConfig:
        if not client_id:
            raise BookingValidationError("clientId")
        if not client_secret:
            raise BookingValidationError("clientSecret")
        config = await self.get()
        config.oauth = OAuthClientCredentials(
            client_id=client_id,
            client_secret=client_secret,
            redirect_uri=redirect_uri or self.default_redirect_uri(),
        )
        await self._config_store.save(config)
        logger.info(
            "oauth_credentials_updated",
            extra={"component": "runtime_config", "action": "set_credentials", "result": "ok"},
        )
        return config

    async def set_webhook(self, webhook_url: str | None) -> RuntimeConfig:
        config = await self.get()
        config.webhook_url = (webhook_url or "").strip()
        await self._config_store.save(config)
        logger.info(
            "webhook_url_updated",
            extra={
                "component": "runtime_config",
                "action": "set_webhook",
                "result": "ok",
                "enabled": bool(config.webhook_url),
            },
        )
        return config


__all__ = ["RuntimeConfigService"]
