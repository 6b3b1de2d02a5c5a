"""Stores Redis para consultores e configuracao de runtime.

Consultores ficam em um hash (`advisors` -> {id: json}); a configuracao em
uma chave simples. Sem TTL: os registros vivem ate serem removidos.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from app.domain.advisor import Advisor
from app.domain.runtime_config import RuntimeConfig
from app.protocols.advisor_store import AdvisorStoreProtocol, ConfigStoreProtocol
from utils.errors import StoreUnavailableError

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

logger = logging.getLogger(__name__)

ADVISORS_HASH_KEY = "advisors"
RUNTIME_CONFIG_KEY = "runtime_config"


def _decode(raw: bytes | str) -> str:
    return raw.decode("utf-8") if isinstance(raw, bytes) else raw


class RedisAdvisorStore(AdvisorStoreProtocol):
    """Store de consultores usando Redis (Upstash compativel)."""

    def __init__(self, redis_client: AsyncRedis, *, hash_key: str = ADVISORS_HASH_KEY) -> None:
        self._redis = redis_client
        self._hash_key = hash_key

    async def get(self, advisor_id: str) -> Advisor | None:
        try:
            raw = await self._redis.hget(self._hash_key, advisor_id)
        except RedisError as exc:
            raise StoreUnavailableError("redis_advisor_get_failed") from exc
        if raw is None:
            return None
        return Advisor.from_record(json.loads(_decode(raw)))

    async def list(self) -> list[Advisor]:
        try:
            entries = await self._redis.hgetall(self._hash_key)
        except RedisError as exc:
            raise StoreUnavailableError("redis_advisor_list_failed") from exc
        return [Advisor.from_record(json.loads(_decode(raw))) for raw in entries.values()]

    async def put(self, advisor: Advisor) -> None:
        data = json.dumps(advisor.to_record(), ensure_ascii=False)
        try:
            await self._redis.hset(self._hash_key, advisor.id, data)
        except RedisError as exc:
            raise StoreUnavailableError("redis_advisor_put_failed") from exc
        logger.debug("advisor_saved", extra={"advisor_id": advisor.id, "backend": "redis"})

    async def delete(self, advisor_id: str) -> bool:
        try:
            removed = await self._redis.hdel(self._hash_key, advisor_id)
        except RedisError as exc:
            raise StoreUnavailableError("redis_advisor_delete_failed") from exc
        return bool(removed)


class RedisConfigStore(ConfigStoreProtocol):
    """Configuracao de runtime em uma chave Redis."""

    def __init__(self, redis_client: AsyncRedis, *, key: str = RUNTIME_CONFIG_KEY) -> None:
        self._redis = redis_client
        self._key = key

    async def load(self) -> RuntimeConfig | None:
        try:
            raw = await self._redis.get(self._key)
        except RedisError as exc:
            raise StoreUnavailableError("redis_config_load_failed") from exc
        if raw is None:
            return None
        return RuntimeConfig.from_record(json.loads(_decode(raw)))

    async def save(self, config: RuntimeConfig) -> None:
        try:
            await self._redis.set(self._key, json.dumps(config.to_record(), ensure_ascii=False))
        except RedisError as exc:
            raise StoreUnavailableError("redis_config_save_failed") from exc
