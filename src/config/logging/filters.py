"""Filters que enriquecem e sanitizam cada record antes do formatter.

`CorrelationIdFilter` injeta `correlation_id` e `service`.
`PiiRedactionFilter` mascara dados de contato do cliente que cheguem
por engano via `extra` (a pagina de agendamento envia nome, email e
telefone; nada disso pode ir para o log).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[redacted]"
DEFAULT_PII_ATTRIBUTES = frozenset(
    {"email", "phone", "notes", "attendee_name", "attendee_email", "attendee_phone"}
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record.

    Um `correlation_id` passado em `extra` tem precedencia sobre o getter.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = getattr(record, "correlation_id", None) or self._get_correlation_id()
        record.service = self._service_name
        return True


class PiiRedactionFilter(logging.Filter):
    def __init__(self, attributes: Iterable[str] = DEFAULT_PII_ATTRIBUTES) -> None:
        super().__init__()
        self._attributes = frozenset(attributes)

    def filter(self, record: logging.LogRecord) -> bool:
        for attribute in self._attributes:
            if getattr(record, attribute, None):
                setattr(record, attribute, REDACTED)
        return True
