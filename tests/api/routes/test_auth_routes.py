"""Testes do fluxo OAuth via HTTP."""

from __future__ import annotations

from tests.api.routes.route_support import RouteContext, connected_advisor


def test_start_redirects_to_consent_page(route_context: RouteContext) -> None:
    route_context.add_advisor(connected_advisor(credentials=None))

    response = route_context.client.get("/auth/start/dana-levi", follow_redirects=False)

    assert response.status_code == 302
    assert "state=dana-levi" in response.headers["location"]


def test_start_for_unknown_advisor_is_404(route_context: RouteContext) -> None:
    response = route_context.client.get("/auth/start/ghost", follow_redirects=False)

    assert response.status_code == 404


def test_callback_success_stores_credentials(route_context: RouteContext) -> None:
    route_context.add_advisor(connected_advisor(credentials=None, email=None))

    response = route_context.client.get(
        "/auth/callback",
        params={"code": "auth-code", "state": "dana-levi"},
        follow_redirects=False,
    )

    assert response.status_code == 302
    assert response.headers["location"] == "/setup/dana-levi?auth=success"
    advisor = route_context.load_advisor("dana-levi")
    assert advisor is not None
    assert advisor.is_connected
    assert advisor.email == "advisor@example.com"


def test_callback_without_state_goes_to_admin(route_context: RouteContext) -> None:
    response = route_context.client.get(
        "/auth/callback",
        params={"code": "auth-code"},
        follow_redirects=False,
    )

    assert response.headers["location"] == "/admin.html?auth=error&message=invalid_advisor"


def test_callback_without_code_reports_error(route_context: RouteContext) -> None:
    route_context.add_advisor(connected_advisor(credentials=None))

    response = route_context.client.get(
        "/auth/callback",
        params={"state": "dana-levi"},
        follow_redirects=False,
    )

    assert response.headers["location"] == "/setup/dana-levi?auth=error"
