"""Reserva de slot: valida o pedido, cria o evento e notifica o webhook.

Limitacao conhecida: o slot nao e revalidado contra free/busy atualizado
antes de criar o evento, e o provider nao garante exclusividade. Dois
clientes quase simultaneos podem reservar o mesmo horario.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.booking import (
    NOTES_PLACEHOLDER,
    PHONE_PLACEHOLDER,
    BookingResult,
    EventSpec,
)
from app.observability import get_correlation_id, record_booking
from utils.errors import (
    AdvisorNotConnectedError,
    AdvisorNotFoundError,
    BookingCommitFailedError,
    BookingValidationError,
    CalendarProviderError,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.advisor import Advisor
    from app.domain.booking import BookingRequest, CalendarEvent, SlotSelection
    from app.protocols.advisor_store import AdvisorStoreProtocol
    from app.protocols.calendar_gateway import CalendarGatewayProtocol
    from app.protocols.notification_sink import NotificationSinkProtocol
    from app.services.runtime_config_service import RuntimeConfigService

logger = logging.getLogger(__name__)

_COMPONENT = "booking_service"
DEFAULT_CALENDAR_ID = "primary"
BOOKING_CREATED_EVENT = "booking_created"


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class BookingService:
    """Commit de agendamentos no calendario do consultor."""

    def __init__(
        self,
        *,
        advisor_store: AdvisorStoreProtocol,
        calendar_gateway: CalendarGatewayProtocol,
        notifier: NotificationSinkProtocol,
        config_service: RuntimeConfigService,
        timezone: str,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._advisor_store = advisor_store
        self._calendar_gateway = calendar_gateway
        self._notifier = notifier
        self._config_service = config_service
        self._timezone = timezone
        self._clock = clock

    async def book(self, advisor_id: str, request: BookingRequest) -> BookingResult:
        """Cria o evento e retorna o link compartilhavel.

        Raises:
            AdvisorNotFoundError: consultor inexistente.
            AdvisorNotConnectedError: consultor sem credenciais.
            BookingValidationError: campo obrigatorio ausente.
            BookingCommitFailedError: falha do provider ao criar o evento.
        """
        advisor = await self._advisor_store.get(advisor_id)
        if advisor is None:
            raise AdvisorNotFoundError
        if not advisor.is_connected:
            raise AdvisorNotConnectedError
        try:
            slot = _validate_request(request)
        except BookingValidationError:
            record_booking(advisor_id, "invalid")
            raise

        event_spec = self._build_event_spec(request, slot)
        calendar_id = advisor.calendars[0].id if advisor.calendars else DEFAULT_CALENDAR_ID
        credentials = await self._config_service.advisor_credentials(advisor)
        try:
            event = await self._calendar_gateway.create_event(
                credentials,
                calendar_id,
                event_spec,
            )
        except CalendarProviderError as exc:
            record_booking(advisor_id, "commit_failed")
            logger.error(
                "booking_commit_failed",
                extra={
                    "component": _COMPONENT,
                    "action": "create_event",
                    "result": "error",
                    "advisor_id": advisor_id,
                    "status_code": exc.status_code,
                },
            )
            raise BookingCommitFailedError from exc

        record_booking(advisor_id, "created")
        logger.info(
            "booking_created",
            extra={
                "component": _COMPONENT,
                "action": "create_event",
                "result": "created",
                "advisor_id": advisor_id,
                "event_id": event.event_id,
            },
        )
        await self._notify_booking(advisor, request, event)
        return BookingResult(event_id=event.event_id, event_link=event.html_link)

    def _build_event_spec(self, request: BookingRequest, slot: SlotSelection) -> EventSpec:
        description = "\n".join(
            (
                f"Name: {request.name}",
                f"Email: {request.email}",
                f"Phone: {request.phone or PHONE_PLACEHOLDER}",
                f"Notes: {request.notes or NOTES_PLACEHOLDER}",
            )
        )
        return EventSpec(
            summary=f"Meeting with {request.name}",
            description=description,
            start=slot.start,
            end=slot.end,
            timezone=self._timezone,
            attendee_emails=[request.email],
            send_updates=True,
        )

    async def _notify_booking(
        self,
        advisor: Advisor,
        request: BookingRequest,
        event: CalendarEvent,
    ) -> None:
        """Entrega `booking_created`; falha aqui nunca derruba a reserva."""
        try:
            config = await self._config_service.get()
            if not config.webhook_url:
                return
            await self._notifier.post(
                config.webhook_url,
                build_booking_payload(advisor, request, event, created_at=self._clock()),
            )
        except Exception as exc:
            logger.warning(
                "booking_notification_failed",
                extra={
                    "component": _COMPONENT,
                    "action": "notify_webhook",
                    "result": "error",
                    "advisor_id": advisor.id,
                    "error_type": type(exc).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )


def build_booking_payload(
    advisor: Advisor,
    request: BookingRequest,
    event: CalendarEvent,
    *,
    created_at: datetime,
) -> dict[str, Any]:
    """Monta o corpo do webhook `booking_created`."""
    slot = request.slot
    return {
        "event": BOOKING_CREATED_EVENT,
        "data": {
            "advisor": {"id": advisor.id, "name": advisor.name, "email": advisor.email},
            "eventId": event.event_id,
            "eventLink": event.html_link,
            "slot": {"start": slot.start, "end": slot.end} if slot is not None else None,
            "attendee": {
                "name": request.name,
                "email": request.email,
                "phone": request.phone,
                "notes": request.notes,
            },
            "createdAt": created_at.isoformat(),
        },
    }


def _validate_request(request: BookingRequest) -> SlotSelection:
    slot = request.slot
    if slot is None or not slot.start.strip():
        raise BookingValidationError("slot.start")
    if not slot.end.strip():
        raise BookingValidationError("slot.end")
    if not request.name.strip():
        raise BookingValidationError("name")
    if not request.email.strip():
        raise BookingValidationError("email")
    return slot


__all__ = ["BOOKING_CREATED_EVENT", "DEFAULT_CALENDAR_ID", "BookingService", "build_booking_payload"]
