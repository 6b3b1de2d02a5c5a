"""Fluxo OAuth: redireciona ao Google e recebe o callback."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from app.bootstrap import get_advisor_admin_service
from app.services import AdvisorAdminService
from utils.errors import (
    AdvisorNotFoundError,
    BookingValidationError,
    CalendarProviderError,
    OAuthNotConfiguredError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_ADVISOR_REDIRECT = "/admin.html?auth=error&message=invalid_advisor"


@router.get("/auth/start/{advisor_id}")
async def start_auth(
    advisor_id: str,
    admin: AdvisorAdminService = Depends(get_advisor_admin_service),
) -> RedirectResponse:
    """Redireciona o consultor para a tela de consentimento do Google."""
    authorization_url = await admin.start_connection(advisor_id)
    return RedirectResponse(authorization_url, status_code=302)


@router.get("/auth/callback")
async def auth_callback(
    code: str | None = None,
    state: str | None = None,
    admin: AdvisorAdminService = Depends(get_advisor_admin_service),
) -> RedirectResponse:
    """Troca o code por credenciais; o resultado volta para a pagina de setup."""
    try:
        await admin.complete_connection(state, code)
    except AdvisorNotFoundError:
        return RedirectResponse(INVALID_ADVISOR_REDIRECT, status_code=302)
    except (BookingValidationError, CalendarProviderError, OAuthNotConfiguredError) as exc:
        logger.warning(
            "oauth_callback_failed",
            extra={
                "component": "auth_router",
                "action": "callback",
                "result": "error",
                "advisor_id": state,
                "error_type": type(exc).__name__,
            },
        )
        return RedirectResponse(f"/setup/{state}?auth=error", status_code=302)
    return RedirectResponse(f"/setup/{state}?auth=success", status_code=302)
