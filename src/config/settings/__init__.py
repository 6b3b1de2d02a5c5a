"""Agregador de settings do servico de agendamento.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    StoreBackend,
    StoreSettings,
    get_base_settings,
    get_store_settings,
)

# Calendar settings
from config.settings.calendar import (
    CalendarSettings,
    get_calendar_settings,
)

# Webhook settings
from config.settings.webhook import (
    WebhookSettings,
    get_webhook_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    # Calendar
    "CalendarSettings",
    "Environment",
    "StoreBackend",
    "StoreSettings",
    # Webhook
    "WebhookSettings",
    "get_base_settings",
    "get_calendar_settings",
    "get_store_settings",
    "get_webhook_settings",
]
