"""Observabilidade: logs estruturados, correlation_id e metricas.

Re-exporta funcoes de correlation_id e metricas para uso em toda a aplicacao.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_booking
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_booking,
    record_latency,
    record_slots_offered,
)

__all__ = [
    "CORRELATION_HEADER",
    "generate_correlation_id",
    "get_correlation_id",
    "record_booking",
    "record_latency",
    "record_slots_offered",
    "reset_correlation_id",
    "set_correlation_id",
]
