from __future__ import annotations

import pytest

from tests.api.routes.route_support import RouteContext, build_route_context


@pytest.fixture
def route_context() -> RouteContext:
    return build_route_context()
