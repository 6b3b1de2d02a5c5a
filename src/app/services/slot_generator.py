"""Geracao deterministica de slots agendaveis (sem IO).

Regras de negocio:
- Dias com weekday em `excluded_weekdays` nao geram slots (padrao: sexta e
  sabado, o fim de semana local).
- Janelas de `duration_minutes` a partir do inicio do expediente; a ultima
  janela que ultrapassaria o fim do expediente e descartada.
- Slot so e ofertado se comecar depois de `now` e nao sobrepor nenhum
  intervalo ocupado.

A funcao e pura dado `now`: cada requisicao deve chamar de novo, porque
tanto o relogio quanto os horarios ocupados mudam.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import TYPE_CHECKING, NamedTuple

from app.domain.booking import CandidateSlot
from app.domain.interval import overlaps
from app.services.slot_display import DEFAULT_DISPLAY_LOCALE, format_slot_display

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from app.domain.advisor import WorkingHours
    from app.domain.interval import BusyInterval

DEFAULT_EXCLUDED_WEEKDAYS: frozenset[int] = frozenset({4, 5})


class _Window(NamedTuple):
    start: datetime
    end: datetime


def generate_slots(
    range_start: datetime,
    range_end: datetime,
    busy: Sequence[BusyInterval],
    duration_minutes: int,
    working_hours: WorkingHours,
    *,
    now: datetime,
    zone: tzinfo,
    excluded_weekdays: Collection[int] = DEFAULT_EXCLUDED_WEEKDAYS,
    locale: str = DEFAULT_DISPLAY_LOCALE,
) -> list[CandidateSlot]:
    """Enumera slots livres entre `range_start` e `range_end`, em ordem cronologica."""
    if duration_minutes <= 0:
        raise ValueError("duration_minutes must be positive")

    step = timedelta(minutes=duration_minutes)
    day = _first_candidate_day(range_start, working_hours, now=now, zone=zone)
    slots: list[CandidateSlot] = []

    while (day_start := _at_hour(day, working_hours.start, zone)) < range_end:
        if day.weekday() not in excluded_weekdays:
            day_end = _at_hour(day, working_hours.end, zone)
            slot_start = day_start
            while slot_start < day_end:
                slot_end = slot_start + step
                if slot_end <= day_end and slot_start > now and _is_free(slot_start, slot_end, busy):
                    slots.append(
                        CandidateSlot(
                            start=slot_start,
                            end=slot_end,
                            display=format_slot_display(
                                slot_start, slot_end, zone=zone, locale=locale
                            ),
                        )
                    )
                slot_start = slot_end
        day += timedelta(days=1)
    return slots


def _first_candidate_day(
    range_start: datetime,
    working_hours: WorkingHours,
    *,
    now: datetime,
    zone: tzinfo,
) -> date:
    day = range_start.astimezone(zone).date()
    if now > _at_hour(day, working_hours.start, zone):
        return day + timedelta(days=1)
    return day


def _at_hour(day: date, hour: int, zone: tzinfo) -> datetime:
    return datetime.combine(day, time(hour=hour), tzinfo=zone)


def _is_free(start: datetime, end: datetime, busy: Sequence[BusyInterval]) -> bool:
    window = _Window(start, end)
    return not any(overlaps(window, interval) for interval in busy)


__all__ = ["DEFAULT_EXCLUDED_WEEKDAYS", "generate_slots"]
