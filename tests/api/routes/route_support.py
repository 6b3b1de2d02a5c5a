"""Monta o app FastAPI com servicos sobre stores em memoria e fakes."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from fastapi.testclient import TestClient

from app.app import create_app
from app.bootstrap import (
    get_advisor_admin_service,
    get_advisor_store,
    get_availability_service,
    get_booking_service,
    get_runtime_config_service,
)
from app.domain.advisor import Advisor, CalendarRef
from app.domain.runtime_config import OAuthClientCredentials, RuntimeConfig
from app.infra.stores import MemoryAdvisorStore, MemoryConfigStore
from app.services import (
    AdvisorAdminService,
    AvailabilityService,
    BookingService,
    RuntimeConfigService,
)
from tests.fakes.fake_calendar_gateway import FakeCalendarGateway
from tests.fakes.fake_oauth_provider import FakeOAuthProvider
from tests.fakes.recording_notifier import RecordingNotifier

BASE_URL = "https://book.example.com"
# Segunda-feira, 08:00 em Israel.
NOW = datetime(2026, 10, 19, 5, 0, tzinfo=UTC)


@dataclass
class RouteContext:
    client: TestClient
    store: MemoryAdvisorStore
    gateway: FakeCalendarGateway
    notifier: RecordingNotifier
    oauth_provider: FakeOAuthProvider

    def add_advisor(self, advisor: Advisor) -> None:
        asyncio.run(self.store.put(advisor))

    def load_advisor(self, advisor_id: str) -> Advisor | None:
        return asyncio.run(self.store.get(advisor_id))


def connected_advisor(**overrides: object) -> Advisor:
    data: dict[str, object] = {
        "id": "dana-levi",
        "name": "Dana Levi",
        "email": "dana@example.com",
        "credentials": {"refresh_token": "rt"},
        "calendars": [CalendarRef(id="primary")],
    }
    data.update(overrides)
    return Advisor.model_validate(data)


def build_route_context() -> RouteContext:
    store = MemoryAdvisorStore()
    gateway = FakeCalendarGateway()
    notifier = RecordingNotifier()
    oauth_provider = FakeOAuthProvider()
    config_service = RuntimeConfigService(
        config_store=MemoryConfigStore(),
        defaults=RuntimeConfig(
            webhook_url="https://hooks.example.com/bookings",
            oauth=OAuthClientCredentials(
                client_id="client-id",
                client_secret="client-secret",
                redirect_uri=f"{BASE_URL}/auth/callback",
            ),
        ),
        base_url=BASE_URL,
    )
    availability = AvailabilityService(
        advisor_store=store,
        calendar_gateway=gateway,
        config_service=config_service,
        zone=ZoneInfo("Asia/Jerusalem"),
        locale="en-US",
        clock=lambda: NOW,
    )
    booking = BookingService(
        advisor_store=store,
        calendar_gateway=gateway,
        notifier=notifier,
        config_service=config_service,
        timezone="Asia/Jerusalem",
        clock=lambda: NOW,
    )
    admin = AdvisorAdminService(
        advisor_store=store,
        calendar_gateway=gateway,
        oauth_provider=oauth_provider,
        config_service=config_service,
    )

    app = create_app()
    app.dependency_overrides[get_advisor_store] = lambda: store
    app.dependency_overrides[get_runtime_config_service] = lambda: config_service
    app.dependency_overrides[get_availability_service] = lambda: availability
    app.dependency_overrides[get_booking_service] = lambda: booking
    app.dependency_overrides[get_advisor_admin_service] = lambda: admin

    return RouteContext(
        client=TestClient(app),
        store=store,
        gateway=gateway,
        notifier=notifier,
        oauth_provider=oauth_provider,
    )
