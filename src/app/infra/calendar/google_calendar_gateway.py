"""Gateway concreto de Google Calendar para o dominio de agendamentos.

Cada chamada monta o service com as credenciais OAuth do consultor; o
client da googleapiclient e sincrono, entao o IO roda em `asyncio.to_thread`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.infra.calendar.google_calendar_parsers import (
    extract_busy_intervals,
    http_status,
    map_calendar_event,
    map_calendar_list,
)
from app.observability import get_correlation_id
from app.protocols.calendar_gateway import CalendarGatewayProtocol
from utils.errors import CalendarProviderError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import datetime

    from app.domain.booking import CalendarEvent, EventSpec
    from app.domain.interval import BusyInterval

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_gateway"

CALENDAR_SCOPES = (
    "https://www.googleapis.com/auth/calendar.readonly",
    "https://www.googleapis.com/auth/calendar.events",
    "https://www.googleapis.com/auth/userinfo.email",
)


def build_calendar_service(credentials: dict[str, Any]) -> Any:
    """Cria o service v3 a partir do dict salvo no registro do consultor."""
    user_credentials = Credentials.from_authorized_user_info(credentials, scopes=list(CALENDAR_SCOPES))
    return build("calendar", "v3", credentials=user_credentials, cache_discovery=False)


class GoogleCalendarGateway(CalendarGatewayProtocol):
    """Implementacao do protocolo de calendario usando API v3 do Google."""

    __slots__ = ("_service_factory", "_timezone", "_zone")

    def __init__(
        self,
        *,
        timezone: str,
        service_factory: Callable[[dict[str, Any]], Any] = build_calendar_service,
    ) -> None:
        self._timezone = timezone
        self._zone = ZoneInfo(timezone)
        self._service_factory = service_factory

    async def list_calendars(self, credentials: dict[str, Any]) -> list[dict[str, Any]]:
        response = await self._call("list_calendars", self._list_calendars_sync, credentials)
        return map_calendar_list(response)

    async def query_free_busy(
        self,
        credentials: dict[str, Any],
        calendar_ids: Sequence[str],
        range_start: datetime,
        range_end: datetime,
    ) -> dict[str, list[BusyInterval]]:
        body = {
            "timeMin": range_start.isoformat(),
            "timeMax": range_end.isoformat(),
            "timeZone": self._timezone,
            "items": [{"id": calendar_id} for calendar_id in calendar_ids],
        }
        response = await self._call("query_free_busy", self._query_freebusy_sync, credentials, body)
        return extract_busy_intervals(response, self._zone)

    async def create_event(
        self,
        credentials: dict[str, Any],
        calendar_id: str,
        event: EventSpec,
    ) -> CalendarEvent:
        send_updates = "all" if event.send_updates else "none"
        response = await self._call(
            "create_event",
            self._insert_event_sync,
            credentials,
            calendar_id,
            event.to_google_body(),
            send_updates,
        )
        try:
            return map_calendar_event(response)
        except ValueError as exc:
            self._log_error(action="create_event", result="invalid_response")
            raise CalendarProviderError("create_event") from exc

    async def _call(self, action: str, func: Callable[..., dict[str, Any]], *args: Any) -> dict[str, Any]:
        try:
            return await asyncio.to_thread(func, *args)
        except HttpError as exc:
            self._log_error(action=action, result="error", exc=exc)
            raise CalendarProviderError(action, status_code=http_status(exc)) from exc
        except Exception as exc:
            # Refresh de token e falhas de rede chegam como excecoes variadas da google-auth.
            self._log_error(action=action, result="error")
            raise CalendarProviderError(action) from exc

    def _list_calendars_sync(self, credentials: dict[str, Any]) -> dict[str, Any]:
        service = self._service_factory(credentials)
        return service.calendarList().list().execute()

    def _query_freebusy_sync(self, credentials: dict[str, Any], body: dict[str, Any]) -> dict[str, Any]:
        service = self._service_factory(credentials)
        return service.freebusy().query(body=body).execute()

    def _insert_event_sync(
        self,
        credentials: dict[str, Any],
        calendar_id: str,
        body: dict[str, Any],
        send_updates: str,
    ) -> dict[str, Any]:
        service = self._service_factory(credentials)
        return service.events().insert(
            calendarId=calendar_id,
            body=body,
            sendUpdates=send_updates,
        ).execute()

    def _log_error(self, *, action: str, result: str, exc: HttpError | None = None) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": action,
            "result": result,
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_calendar_http_error", extra=extra)
            return
        logger.exception("google_calendar_unexpected_error", extra=extra)


__all__ = ["CALENDAR_SCOPES", "GoogleCalendarGateway", "build_calendar_service"]
