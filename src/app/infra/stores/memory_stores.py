"""Stores em memoria: apenas para desenvolvimento e testes.

ATENCAO: Nao usar em staging/production. Sem persistencia entre reinicios.
"""

from __future__ import annotations

from typing import Any

from app.domain.advisor import Advisor
from app.domain.runtime_config import RuntimeConfig
from app.protocols.advisor_store import AdvisorStoreProtocol, ConfigStoreProtocol


class MemoryAdvisorStore(AdvisorStoreProtocol):
    """Store de consultores em memoria: apenas para dev/test."""

    def __init__(self) -> None:
        self._records: dict[str, dict[str, Any]] = {}  # advisor_id -> registro serializado

    async def get(self, advisor_id: str) -> Advisor | None:
        record = self._records.get(advisor_id)
        return Advisor.from_record(record) if record is not None else None

    async def list(self) -> list[Advisor]:
        return [Advisor.from_record(record) for record in self._records.values()]

    async def put(self, advisor: Advisor) -> None:
        # Guardamos a forma serializada para que mutacoes do chamador nao vazem para o store.
        self._records[advisor.id] = advisor.to_record()

    async def delete(self, advisor_id: str) -> bool:
        return self._records.pop(advisor_id, None) is not None


class MemoryConfigStore(ConfigStoreProtocol):
    """Store de configuracao de runtime em memoria: apenas para dev/test."""

    def __init__(self) -> None:
        self._record: dict[str, Any] | None = None

    async def load(self) -> RuntimeConfig | None:
        return RuntimeConfig.from_record(self._record) if self._record is not None else None

    async def save(self, config: RuntimeConfig) -> None:
        self._record = config.to_record()
