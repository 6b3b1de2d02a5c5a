"""Fluxo OAuth do Google para conectar o calendario de um consultor."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build

from app.infra.calendar.google_calendar_gateway import CALENDAR_SCOPES
from app.observability import get_correlation_id
from app.protocols.oauth_provider import OAuthGrant, OAuthProviderProtocol
from utils.errors import CalendarProviderError

if TYPE_CHECKING:
    from google.oauth2.credentials import Credentials

    from app.domain.runtime_config import OAuthClientCredentials

logger = logging.getLogger(__name__)

_COMPONENT = "google_oauth_provider"
_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
_TOKEN_URI = "https://oauth2.googleapis.com/token"


def _build_flow(client: OAuthClientCredentials) -> Flow:
    client_config = {
        "web": {
            "client_id": client.client_id,
            "client_secret": client.client_secret,
            "auth_uri": _AUTH_URI,
            "token_uri": _TOKEN_URI,
            "redirect_uris": [client.redirect_uri],
        }
    }
    # Sem PKCE: start e callback acontecem em requisicoes distintas, sem sessao.
    return Flow.from_client_config(
        client_config,
        scopes=list(CALENDAR_SCOPES),
        redirect_uri=client.redirect_uri,
        autogenerate_code_verifier=False,
    )


class GoogleOAuthProvider(OAuthProviderProtocol):
    """Gera a URL de consentimento e troca o authorization code."""

    def authorization_url(self, client: OAuthClientCredentials, *, state: str) -> str:
        url, _ = _build_flow(client).authorization_url(
            access_type="offline",
            prompt="consent",
            state=state,
        )
        return url

    async def exchange_code(self, client: OAuthClientCredentials, code: str) -> OAuthGrant:
        try:
            return await asyncio.to_thread(self._exchange_code_sync, client, code)
        except Exception as exc:
            logger.warning(
                "google_oauth_exchange_failed",
                extra={
                    "component": _COMPONENT,
                    "action": "exchange_code",
                    "result": "error",
                    "error_type": type(exc).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )
            raise CalendarProviderError("exchange_code") from exc

    def _exchange_code_sync(self, client: OAuthClientCredentials, code: str) -> OAuthGrant:
        flow = _build_flow(client)
        flow.fetch_token(code=code)
        credentials = flow.credentials
        return OAuthGrant(
            credentials=json.loads(credentials.to_json()),
            email=_fetch_account_email(credentials),
        )


def _fetch_account_email(credentials: Credentials) -> str | None:
    service = build("oauth2", "v2", credentials=credentials, cache_discovery=False)
    user_info: dict[str, Any] = service.userinfo().get().execute()
    email = user_info.get("email")
    return str(email) if email else None


__all__ = ["GoogleOAuthProvider"]
