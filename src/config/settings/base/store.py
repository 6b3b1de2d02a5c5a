"""Settings de persistencia de consultores e configuracao de runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

StoreBackend = Literal["memory", "file", "redis"]

_VALID_BACKENDS = ("memory", "file", "redis")


@dataclass(frozen=True)
class StoreSettings:
    """Configurações dos stores.

    Attributes:
        backend: Backend para consultores e configuracao
        advisor_store_path: Arquivo JSON de consultores (backend=file)
        config_store_path: Arquivo JSON da configuracao de runtime (backend=file)
        redis_url: URL de conexão Redis (backend=redis)
    """

    backend: StoreBackend = "file"
    advisor_store_path: str = "advisors.json"
    config_store_path: str = "config.json"
    redis_url: str = ""

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações de store.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in _VALID_BACKENDS:
            errors.append(f"ADVISOR_STORE_BACKEND inválido: {self.backend}")

        if self.backend == "redis" and not self.redis_url:
            errors.append("REDIS_URL obrigatório quando ADVISOR_STORE_BACKEND=redis")

        if self.backend == "file" and not (self.advisor_store_path and self.config_store_path):
            errors.append("ADVISOR_STORE_PATH/CONFIG_STORE_PATH não podem ser vazios")

        if self.backend == "memory" and not base.is_development:
            errors.append("ADVISOR_STORE_BACKEND=memory proibido em staging/production")

        return errors


def _load_store_from_env() -> StoreSettings:
    """Carrega StoreSettings de variáveis de ambiente."""
    backend_str = os.getenv("ADVISOR_STORE_BACKEND", "file").lower()
    backend: StoreBackend = backend_str if backend_str in _VALID_BACKENDS else "file"  # type: ignore[assignment]
    return StoreSettings(
        backend=backend,
        advisor_store_path=os.getenv("ADVISOR_STORE_PATH", "advisors.json"),
        config_store_path=os.getenv("CONFIG_STORE_PATH", "config.json"),
        redis_url=os.getenv("REDIS_URL", ""),
    )


@lru_cache(maxsize=1)
def get_store_settings() -> StoreSettings:
    """Retorna instância cacheada de StoreSettings."""
    return _load_store_from_env()
