"""Settings de integracao com Google Calendar.

Centralizar a leitura de env aqui evita espalhar parse de configuracao
pela aplicacao e reduz risco de divergencia entre servicos.
"""

from __future__ import annotations

import os
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field


class CalendarSettings(BaseModel):
    """Configuracoes de calendar usadas pelo dominio de agendamentos."""

    model_config = ConfigDict(extra="ignore")

    google_client_id: str = Field(
        default="",
        description="Client ID OAuth inicial (pode ser trocado pelo painel).",
    )
    google_client_secret: str = Field(
        default="",
        description="Client secret OAuth inicial.",
    )
    google_redirect_uri: str | None = Field(
        default=None,
        description="Redirect OAuth; sem valor usa <BASE_URL>/auth/callback.",
    )
    calendar_timezone: str = Field(
        default="Asia/Jerusalem",
        description="Timezone base para janelas de atendimento e eventos.",
    )
    calendar_display_locale: str = Field(
        default="he-IL",
        description="Locale dos rotulos de slot.",
    )
    calendar_excluded_weekdays: frozenset[int] = Field(
        default=frozenset({4, 5}),
        description="Dias da semana sem atendimento (0=segunda ... 6=domingo).",
    )
    calendar_default_meeting_duration_min: int = Field(
        default=30,
        ge=1,
        description="Duracao padrao de reuniao para consultores novos.",
    )
    calendar_business_start_hour: int = Field(
        default=9,
        ge=0,
        le=23,
        description="Hora de inicio do expediente para consultores novos.",
    )
    calendar_business_end_hour: int = Field(
        default=17,
        ge=0,
        le=23,
        description="Hora de fim do expediente para consultores novos.",
    )

    def validate_settings(self) -> list[str]:
        """Valida timezone, expediente e dias excluidos."""
        errors: list[str] = []
        try:
            ZoneInfo(self.calendar_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"CALENDAR_TIMEZONE inválido: {self.calendar_timezone}")
        if self.calendar_business_end_hour <= self.calendar_business_start_hour:
            errors.append("CALENDAR_BUSINESS_END_HOUR deve ser > CALENDAR_BUSINESS_START_HOUR")
        if any(day < 0 or day > 6 for day in self.calendar_excluded_weekdays):
            errors.append("CALENDAR_EXCLUDED_WEEKDAYS aceita apenas 0..6")
        return errors


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _parse_weekdays(value: str) -> frozenset[int]:
    """Converte "4,5" em frozenset({4, 5}); string vazia = nenhum dia excluido."""
    return frozenset(int(part) for part in value.split(",") if part.strip())


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variaveis de ambiente."""
    return CalendarSettings(
        google_client_id=os.getenv("GOOGLE_CLIENT_ID", ""),
        google_client_secret=os.getenv("GOOGLE_CLIENT_SECRET", ""),
        google_redirect_uri=_read_optional_env("GOOGLE_REDIRECT_URI"),
        calendar_timezone=os.getenv("CALENDAR_TIMEZONE", "Asia/Jerusalem"),
        calendar_display_locale=os.getenv("CALENDAR_DISPLAY_LOCALE", "he-IL"),
        calendar_excluded_weekdays=_parse_weekdays(os.getenv("CALENDAR_EXCLUDED_WEEKDAYS", "4,5")),
        calendar_default_meeting_duration_min=int(
            os.getenv("CALENDAR_DEFAULT_MEETING_DURATION_MIN", "30")
        ),
        calendar_business_start_hour=int(os.getenv("CALENDAR_BUSINESS_START_HOUR", "9")),
        calendar_business_end_hour=int(os.getenv("CALENDAR_BUSINESS_END_HOUR", "17")),
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instancia cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = ["CalendarSettings", "get_calendar_settings"]
