"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from api.routes.health.router import readiness_check
from app.infra.stores import MemoryAdvisorStore
from tests.api.routes.route_support import RouteContext
from utils.errors import StoreUnavailableError


def test_health_is_always_healthy(route_context: RouteContext) -> None:
    response = route_context.client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_ready_when_store_answers(route_context: RouteContext) -> None:
    response = route_context.client.get("/ready")

    assert response.status_code == 200
    assert response.json()["checks"]["advisor_store"]["status"] == "ok"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_when_store_fails() -> None:
    store = MagicMock(spec=MemoryAdvisorStore)
    store.list = AsyncMock(side_effect=StoreUnavailableError("redis_advisor_list_failed"))

    response = await readiness_check(store)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["advisor_store"]["error"] == "StoreUnavailableError"
