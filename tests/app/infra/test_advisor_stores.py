"""Testes dos stores de consultores e configuracao (memoria, arquivo, Redis)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from app.domain.advisor import Advisor, CalendarRef
from app.domain.runtime_config import RuntimeConfig
from app.infra.stores import (
    JsonFileAdvisorStore,
    JsonFileConfigStore,
    MemoryAdvisorStore,
    MemoryConfigStore,
    RedisAdvisorStore,
    RedisConfigStore,
)
from utils.errors import StoreUnavailableError


def _advisor(advisor_id: str = "dana") -> Advisor:
    return Advisor(
        id=advisor_id,
        name=advisor_id.title(),
        credentials={"refresh_token": "rt"},
        calendars=[CalendarRef(id="primary", summary="Main")],
    )


class TestMemoryStores:
    @pytest.mark.asyncio
    async def test_put_get_list_delete(self) -> None:
        store = MemoryAdvisorStore()
        await store.put(_advisor("dana"))
        await store.put(_advisor("noa"))

        assert (await store.get("dana")) == _advisor("dana")
        assert {advisor.id for advisor in await store.list()} == {"dana", "noa"}
        assert await store.delete("dana") is True
        assert await store.delete("dana") is False
        assert await store.get("dana") is None

    @pytest.mark.asyncio
    async def test_returned_advisor_is_a_copy(self) -> None:
        store = MemoryAdvisorStore()
        await store.put(_advisor())

        loaded = await store.get("dana")
        assert loaded is not None
        loaded.meeting_duration = 90

        reloaded = await store.get("dana")
        assert reloaded is not None
        assert reloaded.meeting_duration == 30

    @pytest.mark.asyncio
    async def test_config_store_roundtrip(self) -> None:
        store = MemoryConfigStore()
        assert await store.load() is None

        await store.save(RuntimeConfig(webhook_url="https://hooks.example.com"))

        loaded = await store.load()
        assert loaded is not None
        assert loaded.webhook_url == "https://hooks.example.com"


class TestJsonFileStores:
    @pytest.mark.asyncio
    async def test_persists_across_instances(self, tmp_path: Path) -> None:
        path = tmp_path / "advisors.json"
        await JsonFileAdvisorStore(path).put(_advisor())

        reopened = JsonFileAdvisorStore(path)

        assert (await reopened.get("dana")) == _advisor()
        document = json.loads(path.read_text(encoding="utf-8"))
        assert document["dana"]["calendars"] == [{"id": "primary", "summary": "Main"}]

    @pytest.mark.asyncio
    async def test_missing_or_blank_file_reads_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "advisors.json"
        store = JsonFileAdvisorStore(path)
        assert await store.list() == []

        path.write_text("  \n", encoding="utf-8")
        assert await store.list() == []

    @pytest.mark.asyncio
    async def test_corrupt_file_is_never_overwritten(self, tmp_path: Path) -> None:
        path = tmp_path / "advisors.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileAdvisorStore(path)

        with pytest.raises(StoreUnavailableError, match="json_store_corrupt"):
            await store.list()
        with pytest.raises(StoreUnavailableError):
            await store.put(_advisor())

        assert path.read_text(encoding="utf-8") == "{not json"

    @pytest.mark.asyncio
    async def test_corrupt_config_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[1,", encoding="utf-8")

        with pytest.raises(StoreUnavailableError):
            await JsonFileConfigStore(path).load()

    @pytest.mark.asyncio
    async def test_delete_rewrites_document(self, tmp_path: Path) -> None:
        path = tmp_path / "advisors.json"
        store = JsonFileAdvisorStore(path)
        await store.put(_advisor("dana"))
        await store.put(_advisor("noa"))

        assert await store.delete("dana") is True
        assert await store.delete("ghost") is False
        assert list(json.loads(path.read_text(encoding="utf-8"))) == ["noa"]

    @pytest.mark.asyncio
    async def test_write_failure_raises_store_unavailable(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = JsonFileAdvisorStore(blocker / "advisors.json")

        with pytest.raises(StoreUnavailableError):
            await store.put(_advisor())

    @pytest.mark.asyncio
    async def test_config_file_roundtrip(self, tmp_path: Path) -> None:
        store = JsonFileConfigStore(tmp_path / "config.json")
        assert await store.load() is None

        await store.save(RuntimeConfig(webhook_url="https://hooks.example.com"))

        loaded = await JsonFileConfigStore(tmp_path / "config.json").load()
        assert loaded is not None
        assert loaded.webhook_url == "https://hooks.example.com"
        assert loaded.has_credentials is False


class TestRedisStores:
    @pytest.mark.asyncio
    async def test_advisor_hash_operations(self) -> None:
        redis_client = AsyncMock()
        redis_client.hget.return_value = json.dumps(_advisor().to_record()).encode("utf-8")
        redis_client.hgetall.return_value = {
            b"dana": json.dumps(_advisor().to_record()).encode("utf-8"),
        }
        redis_client.hdel.return_value = 1
        store = RedisAdvisorStore(redis_client)

        await store.put(_advisor())
        loaded = await store.get("dana")
        listed = await store.list()
        deleted = await store.delete("dana")

        key, field, payload = redis_client.hset.call_args.args
        assert (key, field) == ("advisors", "dana")
        assert json.loads(payload)["name"] == "Dana"
        assert loaded == _advisor()
        assert [advisor.id for advisor in listed] == ["dana"]
        assert deleted is True

    @pytest.mark.asyncio
    async def test_missing_advisor_returns_none(self) -> None:
        redis_client = AsyncMock()
        redis_client.hget.return_value = None

        assert await RedisAdvisorStore(redis_client).get("ghost") is None

    @pytest.mark.asyncio
    async def test_redis_errors_become_store_unavailable(self) -> None:
        redis_client = AsyncMock()
        redis_client.hget.side_effect = RedisConnectionError("down")
        redis_client.get.side_effect = RedisConnectionError("down")

        with pytest.raises(StoreUnavailableError):
            await RedisAdvisorStore(redis_client).get("dana")
        with pytest.raises(StoreUnavailableError):
            await RedisConfigStore(redis_client).load()

    @pytest.mark.asyncio
    async def test_config_key_roundtrip(self) -> None:
        redis_client = AsyncMock()
        store = RedisConfigStore(redis_client)

        await store.save(RuntimeConfig(webhook_url="https://hooks.example.com"))
        key, payload = redis_client.set.call_args.args
        redis_client.get.return_value = payload

        loaded = await store.load()

        assert key == "runtime_config"
        assert loaded is not None
        assert loaded.webhook_url == "https://hooks.example.com"
