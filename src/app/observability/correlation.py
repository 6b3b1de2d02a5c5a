"""Correlation id por requisicao, propagado para logs e para o webhook.

Usa ContextVar para ser async-safe: cada request HTTP tem o seu valor,
definido pelo middleware a partir do header `x-correlation-id`.

Uso:
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "x-correlation-id"

# IDs externos maiores que isso sao descartados e substituidos por um UUID.
_MAX_CORRELATION_ID_LENGTH = 128

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se nao definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual; gera UUID se ausente ou invalido."""
    value = (correlation_id or "").strip()
    if not value or len(value) > _MAX_CORRELATION_ID_LENGTH:
        value = generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
