"""Registro de metricas via structured logging.

As metricas sao registradas como logs estruturados e podem ser agregadas
posteriormente pelo sistema de logs (BigQuery, CloudWatch Insights, etc).

Metricas suportadas:
- Latencia: tempo de execucao por componente/operacao
- Slots: quantidade de slots ofertados por consulta de disponibilidade
- Booking: contador de agendamentos por resultado

Uso:
    from app.observability.metrics import record_latency

    start = time.perf_counter()
    # ... operacao ...
    latency_ms = (time.perf_counter() - start) * 1000
    record_latency("availability_service", "get_availability", latency_ms)
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latencia de operacao.

    Args:
        component: Nome do componente (ex: "availability_service")
        operation: Nome da operacao (ex: "get_availability")
        latency_ms: Latencia em milissegundos
        correlation_id: ID de correlacao; usa o do contexto quando omitido
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id or get_correlation_id(),
        },
    )


def record_slots_offered(advisor_id: str, slot_count: int, busy_count: int) -> None:
    """Registra quantos slots foram ofertados e quantos intervalos ocupados pesaram."""
    logger.info(
        "metric_slots_offered",
        extra={
            "metric_type": "slots_offered",
            "component": "availability_service",
            "advisor_id": advisor_id,
            "slot_count": slot_count,
            "busy_count": busy_count,
            "correlation_id": get_correlation_id(),
        },
    )


def record_booking(advisor_id: str, result: str) -> None:
    """Registra resultado de agendamento (created, commit_failed, invalid)."""
    logger.info(
        "metric_booking",
        extra={
            "metric_type": "booking",
            "component": "booking_service",
            "advisor_id": advisor_id,
            "result": result,
            "correlation_id": get_correlation_id(),
        },
    )
