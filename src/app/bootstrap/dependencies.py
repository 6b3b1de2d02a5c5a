"""Factories de stores e adapters: criação de implementações concretas.

Este módulo centraliza a criação de stores, gateway de calendario,
provider OAuth e notifier baseados nas configurações de ambiente.
"""

from __future__ import annotations

import logging

from app.bootstrap.clients import create_async_redis_client
from app.infra.calendar.google_calendar_gateway import GoogleCalendarGateway
from app.infra.calendar.google_oauth_provider import GoogleOAuthProvider
from app.infra.stores import (
    JsonFileAdvisorStore,
    JsonFileConfigStore,
    MemoryAdvisorStore,
    MemoryConfigStore,
    RedisAdvisorStore,
    RedisConfigStore,
)
from app.infra.webhook.webhook_notifier import WebhookNotifier, WebhookNotifierConfig
from app.protocols.advisor_store import AdvisorStoreProtocol, ConfigStoreProtocol
from app.protocols.calendar_gateway import CalendarGatewayProtocol
from app.protocols.notification_sink import NotificationSinkProtocol
from app.protocols.oauth_provider import OAuthProviderProtocol
from config.settings import (
    get_base_settings,
    get_calendar_settings,
    get_store_settings,
    get_webhook_settings,
)

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Store Factories
# ──────────────────────────────────────────────────────────────────────────────


def _warn_memory_backend(store_name: str) -> None:
    environment = get_base_settings().environment
    if environment != "development":
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": "memory", "store": store_name, "environment": environment},
        )


def create_advisor_store() -> AdvisorStoreProtocol:
    """Cria store de consultores baseado na configuração.

    Lê ADVISOR_STORE_BACKEND:
    - "memory": MemoryAdvisorStore (dev only)
    - "file": JsonFileAdvisorStore (instancia unica)
    - "redis": RedisAdvisorStore (multi-instancia)
    """
    settings = get_store_settings()

    if settings.backend == "redis":
        store: AdvisorStoreProtocol = RedisAdvisorStore(create_async_redis_client())
    elif settings.backend == "memory":
        _warn_memory_backend("advisor")
        store = MemoryAdvisorStore()
    elif settings.backend == "file":
        store = JsonFileAdvisorStore(settings.advisor_store_path)
    else:
        msg = f"ADVISOR_STORE_BACKEND inválido: {settings.backend}"
        raise ValueError(msg)

    logger.info("advisor_store_created", extra={"backend": settings.backend})
    return store


def create_config_store() -> ConfigStoreProtocol:
    """Cria store da configuracao de runtime no mesmo backend dos consultores."""
    settings = get_store_settings()

    if settings.backend == "redis":
        store: ConfigStoreProtocol = RedisConfigStore(create_async_redis_client())
    elif settings.backend == "memory":
        _warn_memory_backend("config")
        store = MemoryConfigStore()
    elif settings.backend == "file":
        store = JsonFileConfigStore(settings.config_store_path)
    else:
        msg = f"ADVISOR_STORE_BACKEND inválido: {settings.backend}"
        raise ValueError(msg)

    logger.info("config_store_created", extra={"backend": settings.backend})
    return store


# ──────────────────────────────────────────────────────────────────────────────
# Adapter Factories
# ──────────────────────────────────────────────────────────────────────────────


def create_calendar_gateway() -> CalendarGatewayProtocol:
    """Cria gateway Google Calendar na timezone configurada."""
    return GoogleCalendarGateway(timezone=get_calendar_settings().calendar_timezone)


def create_oauth_provider() -> OAuthProviderProtocol:
    return GoogleOAuthProvider()


def create_notifier() -> NotificationSinkProtocol:
    """Cria notifier HTTP do webhook com timeout configurado."""
    settings = get_webhook_settings()
    return WebhookNotifier(WebhookNotifierConfig(timeout_seconds=settings.timeout_seconds))
