"""Formatter JSON dos logs do servico.

Campos fixos em todo registro, nesta ordem: asctime, level, logger,
message, correlation_id, service. Campos de `extra` (advisor_id,
component, action, result...) entram depois.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter; exemplo de linha emitida:

        {"asctime": "2026-10-19 09:00:01,120", "level": "INFO",
         "logger": "app.services.booking_service", "message": "booking_created",
         "correlation_id": "abc-123", "service": "agenda-advisors",
         "advisor_id": "dana-levi"}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        # Nomes de consultores em hebraico ficam legiveis no log.
        json_ensure_ascii=False,
    )
