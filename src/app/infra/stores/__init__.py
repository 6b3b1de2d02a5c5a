"""Stores: implementacoes concretas de persistencia.

Modulos disponiveis:
    - memory_stores: Stores em memoria para desenvolvimento/testes
    - json_file_stores: Stores em arquivo JSON (instancia unica)
    - redis_stores: Stores usando Redis (Upstash)
"""

from __future__ import annotations

from app.infra.stores.json_file_stores import JsonFileAdvisorStore, JsonFileConfigStore
from app.infra.stores.memory_stores import MemoryAdvisorStore, MemoryConfigStore
from app.infra.stores.redis_stores import RedisAdvisorStore, RedisConfigStore

__all__ = [
    # Arquivo JSON
    "JsonFileAdvisorStore",
    "JsonFileConfigStore",
    # Memory (dev/test)
    "MemoryAdvisorStore",
    "MemoryConfigStore",
    # Redis (Upstash)
    "RedisAdvisorStore",
    "RedisConfigStore",
]
