"""Protocolos e contratos do core da aplicacao."""

from .advisor_store import AdvisorStoreProtocol, ConfigStoreProtocol
from .calendar_gateway import CalendarGatewayProtocol
from .notification_sink import NotificationSinkProtocol
from .oauth_provider import OAuthGrant, OAuthProviderProtocol

__all__ = [
    "AdvisorStoreProtocol",
    "CalendarGatewayProtocol",
    "ConfigStoreProtocol",
    "NotificationSinkProtocol",
    "OAuthGrant",
    "OAuthProviderProtocol",
]
