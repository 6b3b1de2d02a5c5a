"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_booking_service

    # Na inicialização do serviço
    initialize_app()

    # Obter serviços (também usados como dependências FastAPI)
    booking_service = get_booking_service()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from app.domain.advisor import WorkingHours
from app.domain.runtime_config import OAuthClientCredentials, RuntimeConfig
from app.observability import get_correlation_id
from app.services import (
    AdvisorAdminService,
    AvailabilityService,
    BookingService,
    RuntimeConfigService,
)
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_calendar_settings,
    get_store_settings,
    get_webhook_settings,
)

if TYPE_CHECKING:
    from app.protocols.advisor_store import AdvisorStoreProtocol, ConfigStoreProtocol
    from app.protocols.calendar_gateway import CalendarGatewayProtocol
    from app.protocols.notification_sink import NotificationSinkProtocol
    from app.protocols.oauth_provider import OAuthProviderProtocol

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"calendar: {error}" for error in get_calendar_settings().validate_settings())
    errors.extend(f"store: {error}" for error in get_store_settings().validate(base))
    errors.extend(f"webhook: {error}" for error in get_webhook_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


def build_runtime_defaults() -> RuntimeConfig:
    """Configuracao inicial vinda do ambiente, usada ate o painel salvar outra."""
    base = get_base_settings()
    calendar = get_calendar_settings()
    oauth = None
    if calendar.google_client_id and calendar.google_client_secret:
        oauth = OAuthClientCredentials(
            client_id=calendar.google_client_id,
            client_secret=calendar.google_client_secret,
            redirect_uri=calendar.google_redirect_uri or f"{base.base_url}/auth/callback",
        )
    return RuntimeConfig(webhook_url=get_webhook_settings().url, oauth=oauth)


# ──────────────────────────────────────────────────────────────────────────────
# Adapter Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_advisor_store() -> AdvisorStoreProtocol:
    """Obtém store de consultores (singleton)."""
    from app.bootstrap.dependencies import create_advisor_store
    return create_advisor_store()


@lru_cache(maxsize=1)
def get_config_store() -> ConfigStoreProtocol:
    """Obtém store da configuracao de runtime (singleton)."""
    from app.bootstrap.dependencies import create_config_store
    return create_config_store()


@lru_cache(maxsize=1)
def get_calendar_gateway() -> CalendarGatewayProtocol:
    from app.bootstrap.dependencies import create_calendar_gateway
    return create_calendar_gateway()


@lru_cache(maxsize=1)
def get_oauth_provider() -> OAuthProviderProtocol:
    from app.bootstrap.dependencies import create_oauth_provider
    return create_oauth_provider()


@lru_cache(maxsize=1)
def get_notifier() -> NotificationSinkProtocol:
    from app.bootstrap.dependencies import create_notifier
    return create_notifier()


# ──────────────────────────────────────────────────────────────────────────────
# Service Getters
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_runtime_config_service() -> RuntimeConfigService:
    return RuntimeConfigService(
        config_store=get_config_store(),
        defaults=build_runtime_defaults(),
        base_url=get_base_settings().base_url,
    )


@lru_cache(maxsize=1)
def get_availability_service() -> AvailabilityService:
    """Obtém serviço de disponibilidade (singleton)."""
    calendar = get_calendar_settings()
    return AvailabilityService(
        advisor_store=get_advisor_store(),
        calendar_gateway=get_calendar_gateway(),
        config_service=get_runtime_config_service(),
        zone=ZoneInfo(calendar.calendar_timezone),
        locale=calendar.calendar_display_locale,
        excluded_weekdays=calendar.calendar_excluded_weekdays,
    )


@lru_cache(maxsize=1)
def get_booking_service() -> BookingService:
    """Obtém serviço de reserva (singleton)."""
    return BookingService(
        advisor_store=get_advisor_store(),
        calendar_gateway=get_calendar_gateway(),
        notifier=get_notifier(),
        config_service=get_runtime_config_service(),
        timezone=get_calendar_settings().calendar_timezone,
    )


@lru_cache(maxsize=1)
def get_advisor_admin_service() -> AdvisorAdminService:
    """Obtém serviço de administração de consultores (singleton)."""
    calendar = get_calendar_settings()
    return AdvisorAdminService(
        advisor_store=get_advisor_store(),
        calendar_gateway=get_calendar_gateway(),
        oauth_provider=get_oauth_provider(),
        config_service=get_runtime_config_service(),
        default_meeting_duration=calendar.calendar_default_meeting_duration_min,
        default_working_hours=WorkingHours(
            start=calendar.calendar_business_start_hour,
            end=calendar.calendar_business_end_hour,
        ),
    )
