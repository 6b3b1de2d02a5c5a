"""Schemas HTTP (camelCase no wire) compartilhados pelos routers."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.advisor import CalendarRef, WorkingHours

if TYPE_CHECKING:
    from app.domain.advisor import Advisor
    from app.domain.booking import AvailabilityResult


class CamelModel(BaseModel):
    """Base dos schemas: aceita snake_case e camelCase, responde camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class SuccessResponse(CamelModel):
    success: bool = True


# ──────────────────────────────────────────────────────────────────────────────
# Booking
# ──────────────────────────────────────────────────────────────────────────────


class SlotPayload(CamelModel):
    start: datetime
    end: datetime
    display: str


class AdvisorSummaryPayload(CamelModel):
    name: str
    meeting_duration: int


class AvailabilityResponse(CamelModel):
    advisor: AdvisorSummaryPayload
    slots: list[SlotPayload] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: AvailabilityResult) -> AvailabilityResponse:
        return cls(
            advisor=AdvisorSummaryPayload(
                name=result.advisor.name,
                meeting_duration=result.advisor.meeting_duration,
            ),
            slots=[
                SlotPayload(start=slot.start, end=slot.end, display=slot.display)
                for slot in result.slots
            ],
        )


class SlotSelectionBody(CamelModel):
    start: str | None = None
    end: str | None = None


class BookingBody(CamelModel):
    """Corpo do POST de reserva; campos ausentes viram erro 400 no servico."""

    slot: SlotSelectionBody | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    notes: str | None = None


class BookingResponse(CamelModel):
    success: bool = True
    message: str = "Booking confirmed"
    event_link: str | None = None


# ──────────────────────────────────────────────────────────────────────────────
# Admin
# ──────────────────────────────────────────────────────────────────────────────


class ConfigResponse(CamelModel):
    webhook_url: str
    has_credentials: bool
    base_url: str


class CredentialsBody(CamelModel):
    client_id: str | None = None
    client_secret: str | None = None
    redirect_uri: str | None = None


class WebhookBody(CamelModel):
    webhook_url: str | None = None


class CreateAdvisorBody(CamelModel):
    name: str | None = None


class CreateAdvisorResponse(CamelModel):
    success: bool = True
    id: str
    setup_link: str


class AdvisorSettingsBody(CamelModel):
    calendars: list[CalendarRef] | None = None
    meeting_duration: int | None = Field(default=None, ge=0)
    working_hours: WorkingHours | None = None


class AdvisorListItem(CamelModel):
    id: str
    name: str
    email: str | None = None
    is_connected: bool
    meeting_duration: int
    working_hours: WorkingHours

    @classmethod
    def from_advisor(cls, advisor: Advisor) -> AdvisorListItem:
        return cls(
            id=advisor.id,
            name=advisor.name,
            email=advisor.email,
            is_connected=advisor.is_connected,
            meeting_duration=advisor.meeting_duration,
            working_hours=advisor.working_hours,
        )


class AdvisorDetail(AdvisorListItem):
    calendars: list[CalendarRef] = Field(default_factory=list)
    booking_link: str

    @classmethod
    def from_advisor_with_link(cls, advisor: Advisor, booking_link: str) -> AdvisorDetail:
        return cls(
            **AdvisorListItem.from_advisor(advisor).model_dump(),
            calendars=advisor.calendars,
            booking_link=booking_link,
        )
