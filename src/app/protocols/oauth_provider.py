"""Contrato do fluxo OAuth que conecta o calendario do consultor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from app.domain.runtime_config import OAuthClientCredentials


class OAuthGrant(BaseModel):
    """Resultado da troca do authorization code."""

    credentials: dict[str, Any] = Field(..., description="Tokens opacos do provider.")
    email: str | None = Field(default=None, description="Email da conta conectada.")


class OAuthProviderProtocol(Protocol):
    """Gera URL de consentimento e troca o code por credenciais."""

    def authorization_url(self, client: OAuthClientCredentials, *, state: str) -> str: ...

    async def exchange_code(self, client: OAuthClientCredentials, code: str) -> OAuthGrant: ...
