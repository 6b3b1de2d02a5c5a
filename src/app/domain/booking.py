"""Modelos de dominio para disponibilidade e agendamento.

Esses contratos ficam no dominio para compartilhar dados entre servicos
sem acoplar regras de negocio a detalhes de provider externo.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

PHONE_PLACEHOLDER = "not provided"
NOTES_PLACEHOLDER = "none"


class CandidateSlot(BaseModel):
    """Janela oferecida ao cliente para agendamento."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    start: datetime = Field(..., description="Data/hora de inicio do slot.")
    end: datetime = Field(..., description="Data/hora de fim do slot.")
    display: str = Field(..., description="Rotulo legivel para a pagina de agendamento.")


class SlotSelection(BaseModel):
    """Slot escolhido pelo cliente, como enviado pela pagina (strings ISO)."""

    model_config = ConfigDict(extra="ignore")

    start: str = ""
    end: str = ""


class BookingRequest(BaseModel):
    """Pedido de agendamento; existe apenas durante a chamada de reserva."""

    model_config = ConfigDict(extra="ignore")

    slot: SlotSelection | None = None
    name: str = ""
    email: str = ""
    phone: str | None = None
    notes: str | None = None


class AdvisorSummary(BaseModel):
    """Resumo publico do consultor exibido junto aos slots."""

    name: str
    meeting_duration: int


class AvailabilityResult(BaseModel):
    """Resultado da consulta de disponibilidade."""

    advisor: AdvisorSummary
    slots: list[CandidateSlot] = Field(default_factory=list)


class EventSpec(BaseModel):
    """Dados de evento entregues ao gateway de calendario."""

    model_config = ConfigDict(extra="ignore")

    summary: str
    description: str
    start: str = Field(..., description="Inicio ISO-8601 informado pelo cliente.")
    end: str = Field(..., description="Fim ISO-8601 informado pelo cliente.")
    timezone: str
    attendee_emails: list[str] = Field(default_factory=list)
    send_updates: bool = True

    def to_google_body(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "description": self.description,
            "start": {"dateTime": self.start, "timeZone": self.timezone},
            "end": {"dateTime": self.end, "timeZone": self.timezone},
            "attendees": [{"email": email} for email in self.attendee_emails],
        }


class CalendarEvent(BaseModel):
    """Representa um evento confirmado no provedor de calendario."""

    model_config = ConfigDict(extra="ignore")

    event_id: str = Field(..., description="Identificador unico do evento no calendario.")
    html_link: str = Field(..., description="URL publica para visualizar o evento.")
    status: str = Field(default="confirmed", description="Status atual do evento.")


class BookingResult(BaseModel):
    """Retorno de uma reserva concluida."""

    event_id: str
    event_link: str


__all__ = [
    "NOTES_PLACEHOLDER",
    "PHONE_PLACEHOLDER",
    "AdvisorSummary",
    "AvailabilityResult",
    "BookingRequest",
    "BookingResult",
    "CalendarEvent",
    "CandidateSlot",
    "EventSpec",
    "SlotSelection",
]
