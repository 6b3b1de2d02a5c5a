"""Configuracao editavel em runtime pelo painel de administracao."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class OAuthClientCredentials(BaseModel):
    """Client OAuth do Google usado para conectar consultores."""

    model_config = ConfigDict(extra="ignore")

    client_id: str
    client_secret: str
    redirect_uri: str


class RuntimeConfig(BaseModel):
    """Webhook e credenciais OAuth, persistidos pelo config store."""

    model_config = ConfigDict(extra="ignore")

    webhook_url: str = ""
    oauth: OAuthClientCredentials | None = None

    @property
    def has_credentials(self) -> bool:
        return self.oauth is not None

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> RuntimeConfig:
        return cls.model_validate(record)


__all__ = ["OAuthClientCredentials", "RuntimeConfig"]
