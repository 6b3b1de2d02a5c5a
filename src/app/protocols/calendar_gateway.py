"""Contrato de calendario para uso no dominio de agendamentos.

Mantemos apenas o protocolo aqui para permitir troca de provider sem
impactar os casos de uso que dependem da capacidade de agenda.
As credenciais sao o dict opaco salvo no registro do consultor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from app.domain.booking import CalendarEvent, EventSpec
    from app.domain.interval import BusyInterval


@runtime_checkable
class CalendarGatewayProtocol(Protocol):
    """Contrato para listagem de calendarios, free/busy e criacao de eventos."""

    async def list_calendars(self, credentials: dict[str, Any]) -> list[dict[str, Any]]:
        """Retorna os calendarios visiveis para a conta conectada."""
        ...

    async def query_free_busy(
        self,
        credentials: dict[str, Any],
        calendar_ids: Sequence[str],
        range_start: datetime,
        range_end: datetime,
    ) -> dict[str, list[BusyInterval]]:
        """Consulta em lote os intervalos ocupados de cada calendario."""
        ...

    async def create_event(
        self,
        credentials: dict[str, Any],
        calendar_id: str,
        event: EventSpec,
    ) -> CalendarEvent:
        """Cria evento e notifica os convidados."""
        ...
