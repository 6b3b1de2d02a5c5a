"""Consulta de disponibilidade de um consultor.

Busca os horarios ocupados de todos os calendarios escolhidos em uma unica
consulta free/busy e roda o gerador de slots. Nada e cacheado: cada
chamada consulta o provider de novo.
"""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from app.domain.booking import AdvisorSummary, AvailabilityResult
from app.observability import record_latency, record_slots_offered
from app.services.slot_display import DEFAULT_DISPLAY_LOCALE
from app.services.slot_generator import DEFAULT_EXCLUDED_WEEKDAYS, generate_slots
from utils.errors import (
    AdvisorNotConnectedError,
    AdvisorNotFoundError,
    AvailabilityFetchFailedError,
    CalendarProviderError,
    NoCalendarsSelectedError,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Collection
    from datetime import tzinfo

    from app.domain.advisor import Advisor
    from app.protocols.advisor_store import AdvisorStoreProtocol
    from app.protocols.calendar_gateway import CalendarGatewayProtocol
    from app.services.runtime_config_service import RuntimeConfigService

logger = logging.getLogger(__name__)

_COMPONENT = "availability_service"

# Horizonte fixo de consulta.
BOOKING_HORIZON_DAYS = 14


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class AvailabilityService:
    """Orquestra store de consultores, free/busy e gerador de slots."""

    def __init__(
        self,
        *,
        advisor_store: AdvisorStoreProtocol,
        calendar_gateway: CalendarGatewayProtocol,
        zone: tzinfo,
        config_service: RuntimeConfigService | None = None,
        locale: str = DEFAULT_DISPLAY_LOCALE,
        excluded_weekdays: Collection[int] = DEFAULT_EXCLUDED_WEEKDAYS,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._advisor_store = advisor_store
        self._calendar_gateway = calendar_gateway
        self._config_service = config_service
        self._zone = zone
        self._locale = locale
        self._excluded_weekdays = frozenset(excluded_weekdays)
        self._clock = clock

    async def get_availability(self, advisor_id: str) -> AvailabilityResult:
        """Retorna resumo do consultor e slots livres nos proximos 14 dias.

        Raises:
            AdvisorNotFoundError: consultor inexistente.
            AdvisorNotConnectedError: consultor sem credenciais.
            NoCalendarsSelectedError: nenhum calendario escolhido.
            AvailabilityFetchFailedError: falha na consulta free/busy.
        """
        advisor = await self._load_bookable_advisor(advisor_id)
        started_at = time.perf_counter()
        range_start = self._clock()
        range_end = range_start + timedelta(days=BOOKING_HORIZON_DAYS)
        credentials = (
            await self._config_service.advisor_credentials(advisor)
            if self._config_service is not None
            else dict(advisor.credentials or {})
        )

        try:
            busy_by_calendar = await self._calendar_gateway.query_free_busy(
                credentials,
                advisor.calendar_ids,
                range_start,
                range_end,
            )
        except CalendarProviderError as exc:
            logger.error(
                "availability_fetch_failed",
                extra={
                    "component": _COMPONENT,
                    "action": "query_free_busy",
                    "result": "error",
                    "advisor_id": advisor_id,
                    "status_code": exc.status_code,
                },
            )
            raise AvailabilityFetchFailedError from exc

        busy = [interval for intervals in busy_by_calendar.values() for interval in intervals]
        slots = generate_slots(
            range_start,
            range_end,
            busy,
            advisor.meeting_duration,
            advisor.working_hours,
            now=range_start,
            zone=self._zone,
            excluded_weekdays=self._excluded_weekdays,
            locale=self._locale,
        )
        record_slots_offered(advisor_id, len(slots), len(busy))
        record_latency(_COMPONENT, "get_availability", (time.perf_counter() - started_at) * 1000)
        return AvailabilityResult(
            advisor=AdvisorSummary(name=advisor.name, meeting_duration=advisor.meeting_duration),
            slots=slots,
        )

    async def _load_bookable_advisor(self, advisor_id: str) -> Advisor:
        advisor = await self._advisor_store.get(advisor_id)
        if advisor is None:
            raise AdvisorNotFoundError
        if not advisor.is_connected:
            raise AdvisorNotConnectedError
        if not advisor.calendars:
            raise NoCalendarsSelectedError
        return advisor


__all__ = ["BOOKING_HORIZON_DAYS", "AvailabilityService"]
