"""Protocolos de persistencia de consultores e configuracao de runtime.

O core nunca toca o meio de armazenamento: recebe uma destas
implementacoes ja montada pelo bootstrap.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.advisor import Advisor
    from app.domain.runtime_config import RuntimeConfig


class AdvisorStoreProtocol(ABC):
    """Store chave-valor de consultores (id -> registro)."""

    @abstractmethod
    async def get(self, advisor_id: str) -> Advisor | None: ...

    @abstractmethod
    async def list(self) -> list[Advisor]: ...

    @abstractmethod
    async def put(self, advisor: Advisor) -> None: ...

    @abstractmethod
    async def delete(self, advisor_id: str) -> bool: ...


class ConfigStoreProtocol(ABC):
    """Store do documento unico de configuracao de runtime."""

    @abstractmethod
    async def load(self) -> RuntimeConfig | None:
        """Retorna None quando nada foi salvo ainda."""

    @abstractmethod
    async def save(self, config: RuntimeConfig) -> None: ...
