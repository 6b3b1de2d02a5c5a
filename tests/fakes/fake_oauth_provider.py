"""Provider OAuth fake: URL deterministica e grant configuravel."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.oauth_provider import OAuthGrant
from utils.errors import CalendarProviderError

if TYPE_CHECKING:
    from app.domain.runtime_config import OAuthClientCredentials


class FakeOAuthProvider:
    def __init__(self, *, email: str | None = "advisor@example.com", fail: bool = False) -> None:
        self._email = email
        self._fail = fail
        self.exchanged_codes: list[str] = []

    def authorization_url(self, client: OAuthClientCredentials, *, state: str) -> str:
        return f"https://accounts.example.com/auth?client_id={client.client_id}&state={state}"

    async def exchange_code(self, client: OAuthClientCredentials, code: str) -> OAuthGrant:
        self.exchanged_codes.append(code)
        if self._fail:
            raise CalendarProviderError("exchange_code")
        return OAuthGrant(credentials={"refresh_token": f"rt-{code}"}, email=self._email)
