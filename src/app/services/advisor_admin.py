"""Administracao de consultores: cadastro, ajustes e conexao OAuth."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.advisor import (
    DEFAULT_MEETING_DURATION_MIN,
    Advisor,
    CalendarRef,
    WorkingHours,
    derive_advisor_id,
)
from utils.errors import (
    AdvisorAlreadyExistsError,
    AdvisorNotConnectedError,
    AdvisorNotFoundError,
    BookingValidationError,
    CalendarListFailedError,
    CalendarProviderError,
    OAuthNotConfiguredError,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from app.domain.runtime_config import OAuthClientCredentials
    from app.protocols.advisor_store import AdvisorStoreProtocol
    from app.protocols.calendar_gateway import CalendarGatewayProtocol
    from app.protocols.oauth_provider import OAuthProviderProtocol
    from app.services.runtime_config_service import RuntimeConfigService

logger = logging.getLogger(__name__)

_COMPONENT = "advisor_admin"


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class AdvisorAdminService:
    """Operacoes do painel de administracao e da pagina de setup."""

    def __init__(
        self,
        *,
        advisor_store: AdvisorStoreProtocol,
        calendar_gateway: CalendarGatewayProtocol,
        oauth_provider: OAuthProviderProtocol,
        config_service: RuntimeConfigService,
        default_meeting_duration: int = DEFAULT_MEETING_DURATION_MIN,
        default_working_hours: WorkingHours | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._advisor_store = advisor_store
        self._calendar_gateway = calendar_gateway
        self._oauth_provider = oauth_provider
        self._config_service = config_service
        self._default_meeting_duration = default_meeting_duration
        self._default_working_hours = default_working_hours or WorkingHours()
        self._clock = clock

    def setup_link(self, advisor_id: str) -> str:
        return f"{self._config_service.base_url}/setup/{advisor_id}"

    def booking_link(self, advisor_id: str) -> str:
        return f"{self._config_service.base_url}/book/{advisor_id}"

    async def create_advisor(self, name: str | None) -> Advisor:
        """Cadastra consultor com id derivado do nome; colisao e rejeitada."""
        display_name = (name or "").strip()
        if not display_name:
            raise BookingValidationError("name")
        advisor_id = derive_advisor_id(display_name, now=self._clock())
        if await self._advisor_store.get(advisor_id) is not None:
            raise AdvisorAlreadyExistsError
        advisor = Advisor(
            id=advisor_id,
            name=display_name,
            meeting_duration=self._default_meeting_duration,
            working_hours=self._default_working_hours.model_copy(),
        )
        await self._advisor_store.put(advisor)
        logger.info(
            "advisor_created",
            extra={"component": _COMPONENT, "action": "create", "advisor_id": advisor_id},
        )
        return advisor

    async def list_advisors(self) -> list[Advisor]:
        return await self._advisor_store.list()

    async def get_advisor(self, advisor_id: str) -> Advisor:
        advisor = await self._advisor_store.get(advisor_id)
        if advisor is None:
            raise AdvisorNotFoundError
        return advisor

    async def update_settings(
        self,
        advisor_id: str,
        *,
        calendars: Sequence[CalendarRef] | None = None,
        meeting_duration: int | None = None,
        working_hours: WorkingHours | None = None,
    ) -> Advisor:
        """Atualiza apenas os campos informados (last-write-wins)."""
        advisor = await self.get_advisor(advisor_id)
        if calendars is not None:
            advisor.calendars = list(calendars)
        if meeting_duration:
            advisor.meeting_duration = meeting_duration
        if working_hours is not None:
            advisor.working_hours = working_hours
        await self._advisor_store.put(advisor)
        logger.info(
            "advisor_settings_updated",
            extra={
                "component": _COMPONENT,
                "action": "update_settings",
                "advisor_id": advisor_id,
                "calendar_count": len(advisor.calendars),
            },
        )
        return advisor

    async def delete_advisor(self, advisor_id: str) -> None:
        if not await self._advisor_store.delete(advisor_id):
            raise AdvisorNotFoundError
        logger.info(
            "advisor_deleted",
            extra={"component": _COMPONENT, "action": "delete", "advisor_id": advisor_id},
        )

    async def list_calendars(self, advisor_id: str) -> list[dict[str, Any]]:
        """Lista calendarios da conta Google conectada ao consultor."""
        advisor = await self.get_advisor(advisor_id)
        if not advisor.is_connected:
            raise AdvisorNotConnectedError("Not connected to Google", status_code=401)
        credentials = await self._config_service.advisor_credentials(advisor)
        try:
            return await self._calendar_gateway.list_calendars(credentials)
        except CalendarProviderError as exc:
            logger.error(
                "calendar_list_failed",
                extra={
                    "component": _COMPONENT,
                    "action": "list_calendars",
                    "result": "error",
                    "advisor_id": advisor_id,
                    "status_code": exc.status_code,
                },
            )
            raise CalendarListFailedError from exc

    async def start_connection(self, advisor_id: str) -> str:
        """Retorna a URL de consentimento do Google para o consultor."""
        await self.get_advisor(advisor_id)
        client = await self._require_oauth_client()
        return self._oauth_provider.authorization_url(client, state=advisor_id)

    async def complete_connection(self, advisor_id: str | None, code: str | None) -> Advisor:
        """Troca o code por credenciais e grava no registro do consultor.

        Raises:
            AdvisorNotFoundError: `state` ausente ou consultor inexistente.
            BookingValidationError: `code` ausente.
            CalendarProviderError: falha na troca do code.
        """
        if not advisor_id:
            raise AdvisorNotFoundError
        advisor = await self.get_advisor(advisor_id)
        if not code:
            raise BookingValidationError("code")
        client = await self._require_oauth_client()
        grant = await self._oauth_provider.exchange_code(client, code)
        advisor.credentials = grant.credentials
        advisor.email = grant.email
        await self._advisor_store.put(advisor)
        logger.info(
            "advisor_connected",
            extra={"component": _COMPONENT, "action": "complete_connection", "advisor_id": advisor_id},
        )
        return advisor

    async def _require_oauth_client(self) -> OAuthClientCredentials:
        config = await self._config_service.get()
        if config.oauth is None:
            raise OAuthNotConfiguredError
        return config.oauth


__all__ = ["AdvisorAdminService"]
