"""Testes das rotas de administracao."""

from __future__ import annotations

from tests.api.routes.route_support import BASE_URL, RouteContext, connected_advisor


def test_runtime_config_flow(route_context: RouteContext) -> None:
    client = route_context.client

    initial = client.get("/api/config").json()
    saved = client.post("/api/webhook", json={"webhookUrl": "https://hooks.example.com/new"})
    credentials = client.post(
        "/api/credentials",
        json={"clientId": "new-id", "clientSecret": "new-secret"},
    )
    missing_secret = client.post("/api/credentials", json={"clientId": "new-id"})

    assert initial == {
        "webhookUrl": "https://hooks.example.com/bookings",
        "hasCredentials": True,
        "baseUrl": BASE_URL,
    }
    assert saved.json() == {"success": True}
    assert credentials.json() == {"success": True}
    assert missing_secret.status_code == 400
    assert client.get("/api/config").json()["webhookUrl"] == "https://hooks.example.com/new"


def test_create_list_and_get_advisor(route_context: RouteContext) -> None:
    client = route_context.client

    created = client.post("/api/advisors", json={"name": "Dana Levi"})
    duplicate = client.post("/api/advisors", json={"name": "Dana Levi"})
    blank = client.post("/api/advisors", json={})
    listed = client.get("/api/advisors").json()
    detail = client.get("/api/advisor/dana-levi").json()

    assert created.json() == {
        "success": True,
        "id": "dana-levi",
        "setupLink": f"{BASE_URL}/setup/dana-levi",
    }
    assert duplicate.status_code == 400
    assert blank.status_code == 400
    assert listed == [
        {
            "id": "dana-levi",
            "name": "Dana Levi",
            "email": None,
            "isConnected": False,
            "meetingDuration": 30,
            "workingHours": {"start": 9, "end": 17},
        }
    ]
    assert detail["bookingLink"] == f"{BASE_URL}/book/dana-levi"
    assert detail["calendars"] == []


def test_update_settings_accepts_setup_page_payload(route_context: RouteContext) -> None:
    route_context.add_advisor(connected_advisor(calendars=[]))

    response = route_context.client.post(
        "/api/advisor/dana-levi/settings",
        json={
            "calendars": [{"id": "work@example.com", "name": "Work"}],
            "meetingDuration": 45,
            "workingHours": {"start": 10, "end": 18},
        },
    )

    assert response.json() == {"success": True}
    advisor = route_context.load_advisor("dana-levi")
    assert advisor is not None
    assert advisor.calendars[0].summary == "Work"
    assert advisor.meeting_duration == 45
    assert advisor.working_hours.end == 18


def test_settings_and_delete_unknown_advisor(route_context: RouteContext) -> None:
    client = route_context.client

    assert client.post("/api/advisor/ghost/settings", json={}).status_code == 404
    assert client.delete("/api/advisors/ghost").status_code == 404


def test_delete_advisor(route_context: RouteContext) -> None:
    route_context.add_advisor(connected_advisor())

    response = route_context.client.delete("/api/advisors/dana-levi")

    assert response.json() == {"success": True}
    assert route_context.load_advisor("dana-levi") is None


def test_calendars_require_connection(route_context: RouteContext) -> None:
    route_context.add_advisor(connected_advisor(id="offline", credentials=None))

    response = route_context.client.get("/api/advisor/offline/calendars")

    assert response.status_code == 401
    assert response.json() == {"error": "Not connected to Google"}


def test_settings_with_wrong_types_is_rejected(route_context: RouteContext) -> None:
    route_context.add_advisor(connected_advisor())

    response = route_context.client.post(
        "/api/advisor/dana-levi/settings",
        json={"meetingDuration": "long", "workingHours": {"start": 30}},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}
    advisor = route_context.load_advisor("dana-levi")
    assert advisor is not None
    assert advisor.meeting_duration == 30
