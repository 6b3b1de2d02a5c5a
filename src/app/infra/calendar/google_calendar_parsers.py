"""Helpers internos de parsing para respostas da Google Calendar API."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from app.domain.booking import CalendarEvent
from app.domain.interval import BusyInterval

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

    from googleapiclient.errors import HttpError


def extract_busy_intervals(
    response: dict[str, Any],
    zone: ZoneInfo,
) -> dict[str, list[BusyInterval]]:
    """Mapeia `calendars.<id>.busy` da resposta free/busy para o dominio.

    Calendarios com `errors` (ex: notFound) entram com lista vazia, igual
    a um calendario sem compromissos.
    """
    calendars = response.get("calendars") if isinstance(response, dict) else {}
    if not isinstance(calendars, dict):
        return {}
    result: dict[str, list[BusyInterval]] = {}
    for calendar_id, calendar_data in calendars.items():
        busy = calendar_data.get("busy", []) if isinstance(calendar_data, dict) else []
        result[calendar_id] = [
            BusyInterval(start=start, end=end)
            for item in busy if isinstance(item, dict)
            if (start := parse_google_datetime(item.get("start"), zone))
            if (end := parse_google_datetime(item.get("end"), zone))
            if end > start
        ]
    return result


def map_calendar_event(payload: dict[str, Any]) -> CalendarEvent:
    event_id = str(payload.get("id") or "")
    if not event_id:
        # Falhamos explicitamente para nao devolver link de evento inexistente.
        raise ValueError("missing_event_id")
    return CalendarEvent(
        event_id=event_id,
        html_link=str(payload.get("htmlLink") or ""),
        status=str(payload.get("status") or "confirmed"),
    )


def map_calendar_list(payload: dict[str, Any]) -> list[dict[str, Any]]:
    items = payload.get("items") if isinstance(payload, dict) else None
    return [item for item in items or [] if isinstance(item, dict)]


def parse_google_datetime(value: Any, zone: ZoneInfo) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed.replace(tzinfo=zone) if parsed.tzinfo is None else parsed.astimezone(zone)


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None
