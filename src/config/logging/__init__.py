"""Logging JSON estruturado do servico.

`configure_logging` e chamado uma vez pelo bootstrap; os modulos usam
`logging.getLogger(__name__)` e registram eventos snake_case com `extra`.
"""

from config.logging.config import DEFAULT_SERVICE_NAME, configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, PiiRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "PiiRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
