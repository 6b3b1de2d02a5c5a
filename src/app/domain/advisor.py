"""Modelos de dominio do consultor (advisor).

O registro do consultor e o que o store persiste. Credenciais OAuth sao
tratadas como um dict opaco: quem entende o formato e o provider de
calendario, nao o dominio.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

DEFAULT_MEETING_DURATION_MIN = 30
DEFAULT_START_HOUR = 9
DEFAULT_END_HOUR = 17

_INVALID_ID_CHARS = re.compile(r"[^a-z0-9\u0590-\u05ff]")
_DASH_RUNS = re.compile(r"-+")


class WorkingHours(BaseModel):
    """Janela diaria de atendimento, em horas cheias (0-23).

    `start >= end` e aceito: o gerador simplesmente nao produz slots.
    """

    model_config = ConfigDict(extra="ignore")

    start: int = Field(default=DEFAULT_START_HOUR, ge=0, le=23)
    end: int = Field(default=DEFAULT_END_HOUR, ge=0, le=23)


class CalendarRef(BaseModel):
    """Referencia a um calendario do Google escolhido para sincronizar."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    # A pagina de setup envia `name`; o Google usa `summary`.
    summary: str = Field(default="", validation_alias=AliasChoices("summary", "name"))


class Advisor(BaseModel):
    """Consultor com calendario conectado que recebe agendamentos."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    email: str | None = None
    credentials: dict[str, Any] | None = None
    calendars: list[CalendarRef] = Field(default_factory=list)
    meeting_duration: int = Field(default=DEFAULT_MEETING_DURATION_MIN, ge=1)
    working_hours: WorkingHours = Field(default_factory=WorkingHours)

    @property
    def is_connected(self) -> bool:
        return bool(self.credentials)

    @property
    def calendar_ids(self) -> list[str]:
        return [calendar.id for calendar in self.calendars]

    def to_record(self) -> dict[str, Any]:
        """Serializa para o formato gravado pelos stores."""
        return self.model_dump(mode="json")

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Advisor:
        return cls.model_validate(record)


def derive_advisor_id(name: str, *, now: datetime | None = None) -> str:
    """Gera slug estavel a partir do nome exibido.

    Mantem letras latinas minusculas, digitos e hebraico; o resto vira `-`.
    Quando nada sobra, usa `advisor-<epoch ms>` com o relogio informado.
    """
    slug = _INVALID_ID_CHARS.sub("-", (name or "").lower())
    slug = _DASH_RUNS.sub("-", slug).strip("-")
    if slug:
        return slug
    moment = now or datetime.now(tz=UTC)
    return f"advisor-{int(moment.timestamp() * 1000)}"


__all__ = [
    "DEFAULT_END_HOUR",
    "DEFAULT_MEETING_DURATION_MIN",
    "DEFAULT_START_HOUR",
    "Advisor",
    "CalendarRef",
    "WorkingHours",
    "derive_advisor_id",
]
