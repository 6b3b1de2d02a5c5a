"""Rotulo legivel de slot para a pagina de agendamento.

Formato: `<dia da semana, dia mes ano> | HH:MM - HH:MM`, com nomes do
locale escolhido e horario 24h no fuso fixo do servico.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import NamedTuple

DEFAULT_DISPLAY_LOCALE = "he-IL"
_FALLBACK_LOCALE = "en-US"


class _LocaleNames(NamedTuple):
    weekdays: tuple[str, ...]  # segunda -> domingo, mesma ordem de datetime.weekday()
    months: tuple[str, ...]
    date_pattern: str


_LOCALES: dict[str, _LocaleNames] = {
    "he-IL": _LocaleNames(
        weekdays=(
            "יום שני",
            "יום שלישי",
            "יום רביעי",
            "יום חמישי",
            "יום שישי",
            "יום שבת",
            "יום ראשון",
        ),
        months=(
            "בינואר",
            "בפברואר",
            "במרץ",
            "באפריל",
            "במאי",
            "ביוני",
            "ביולי",
            "באוגוסט",
            "בספטמבר",
            "באוקטובר",
            "בנובמבר",
            "בדצמבר",
        ),
        date_pattern="{weekday}, {day} {month} {year}",
    ),
    "pt-BR": _LocaleNames(
        weekdays=(
            "segunda-feira",
            "terça-feira",
            "quarta-feira",
            "quinta-feira",
            "sexta-feira",
            "sábado",
            "domingo",
        ),
        months=(
            "janeiro",
            "fevereiro",
            "março",
            "abril",
            "maio",
            "junho",
            "julho",
            "agosto",
            "setembro",
            "outubro",
            "novembro",
            "dezembro",
        ),
        date_pattern="{weekday}, {day} de {month} de {year}",
    ),
    "en-US": _LocaleNames(
        weekdays=(
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
            "Sunday",
        ),
        months=(
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ),
        date_pattern="{weekday}, {month} {day}, {year}",
    ),
}


def supported_locales() -> frozenset[str]:
    return frozenset(_LOCALES)


def format_slot_display(
    start: datetime,
    end: datetime,
    *,
    zone: tzinfo,
    locale: str = DEFAULT_DISPLAY_LOCALE,
) -> str:
    """Formata o slot no fuso `zone`; locale desconhecido cai para en-US."""
    names = _LOCALES.get(locale) or _LOCALES[_FALLBACK_LOCALE]
    local_start = start.astimezone(zone)
    local_end = end.astimezone(zone)
    date_label = names.date_pattern.format(
        weekday=names.weekdays[local_start.weekday()],
        day=local_start.day,
        month=names.months[local_start.month - 1],
        year=local_start.year,
    )
    return f"{date_label} | {local_start:%H:%M} - {local_end:%H:%M}"


__all__ = ["DEFAULT_DISPLAY_LOCALE", "format_slot_display", "supported_locales"]
