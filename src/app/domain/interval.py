"""Modelo de intervalo ocupado e predicado de sobreposicao.

`overlaps` e o unico primitivo de conflito do agendamento: o gerador de
slots usa exatamente esta regra para descartar janelas ocupadas.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Interval(Protocol):
    start: datetime
    end: datetime


class BusyInterval(BaseModel):
    """Intervalo ja ocupado em um dos calendarios do consultor."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    start: datetime = Field(..., description="Inicio do intervalo ocupado.")
    end: datetime = Field(..., description="Fim (exclusivo) do intervalo ocupado.")

    @model_validator(mode="after")
    def _check_order(self) -> BusyInterval:
        if self.end <= self.start:
            raise ValueError("busy_interval_end_before_start")
        return self


def overlaps(a: _Interval, b: _Interval) -> bool:
    """Intervalos semiabertos [start, end) se sobrepoem; encostar nao conta."""
    return a.start < b.end and b.start < a.end


__all__ = ["BusyInterval", "overlaps"]
