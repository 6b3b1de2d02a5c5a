"""Endpoints publicos da pagina de agendamento."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.routes.schemas import AvailabilityResponse, BookingBody, BookingResponse
from app.bootstrap import get_availability_service, get_booking_service
from app.domain.booking import BookingRequest, SlotSelection
from app.services import AvailabilityService, BookingService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/book/{advisor_id}/availability", response_model=AvailabilityResponse)
async def get_availability(
    advisor_id: str,
    service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilityResponse:
    """Slots livres do consultor nos proximos 14 dias."""
    result = await service.get_availability(advisor_id)
    return AvailabilityResponse.from_result(result)


@router.post("/api/book/{advisor_id}", response_model=BookingResponse)
async def book_slot(
    advisor_id: str,
    body: BookingBody,
    service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    """Reserva o slot escolhido e devolve o link do evento."""
    result = await service.book(advisor_id, _to_booking_request(body))
    return BookingResponse(event_link=result.event_link)


def _to_booking_request(body: BookingBody) -> BookingRequest:
    slot = None
    if body.slot is not None:
        slot = SlotSelection(start=body.slot.start or "", end=body.slot.end or "")
    return BookingRequest(
        slot=slot,
        name=body.name or "",
        email=body.email or "",
        phone=body.phone or None,
        notes=body.notes or None,
    )
