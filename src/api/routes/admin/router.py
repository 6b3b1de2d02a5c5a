"""Endpoints do painel de administracao e da pagina de setup do consultor."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from api.routes.schemas import (
    AdvisorDetail,
    AdvisorListItem,
    AdvisorSettingsBody,
    ConfigResponse,
    CreateAdvisorBody,
    CreateAdvisorResponse,
    CredentialsBody,
    SuccessResponse,
    WebhookBody,
)
from app.bootstrap import get_advisor_admin_service, get_runtime_config_service
from app.services import AdvisorAdminService, RuntimeConfigService

router = APIRouter()


# ──────────────────────────────────────────────────────────────────────────────
# Configuracao de runtime
# ──────────────────────────────────────────────────────────────────────────────


@router.get("/api/config", response_model=ConfigResponse)
async def get_config(
    config_service: RuntimeConfigService = Depends(get_runtime_config_service),
) -> ConfigResponse:
    return ConfigResponse.model_validate(await config_service.describe())


@router.post("/api/credentials", response_model=SuccessResponse)
async def set_credentials(
    body: CredentialsBody,
    config_service: RuntimeConfigService = Depends(get_runtime_config_service),
) -> SuccessResponse:
    await config_service.set_credentials(
        client_id=(body.client_id or "").strip(),
        client_secret=(body.client_secret or "").strip(),
        redirect_uri=body.redirect_uri,
    )
    return SuccessResponse()


@router.post("/api/webhook", response_model=SuccessResponse)
async def set_webhook(
    body: WebhookBody,
    config_service: RuntimeConfigService = Depends(get_runtime_config_service),
) -> SuccessResponse:
    await config_service.set_webhook(body.webhook_url)
    return SuccessResponse()


# ──────────────────────────────────────────────────────────────────────────────
# Consultores
# ──────────────────────────────────────────────────────────────────────────────


@router.get("/api/advisors", response_model=list[AdvisorListItem])
async def list_advisors(
    admin: AdvisorAdminService = Depends(get_advisor_admin_service),
) -> list[AdvisorListItem]:
    return [AdvisorListItem.from_advisor(advisor) for advisor in await admin.list_advisors()]


@router.post("/api/advisors", response_model=CreateAdvisorResponse)
async def create_advisor(
    body: CreateAdvisorBody,
    admin: AdvisorAdminService = Depends(get_advisor_admin_service),
) -> CreateAdvisorResponse:
    advisor = await admin.create_advisor(body.name)
    return CreateAdvisorResponse(id=advisor.id, setup_link=admin.setup_link(advisor.id))


@router.delete("/api/advisors/{advisor_id}", response_model=SuccessResponse)
async def delete_advisor(
    advisor_id: str,
    admin: AdvisorAdminService = Depends(get_advisor_admin_service),
) -> SuccessResponse:
    await admin.delete_advisor(advisor_id)
    return SuccessResponse()


@router.get("/api/advisor/{advisor_id}", response_model=AdvisorDetail)
async def get_advisor(
    advisor_id: str,
    admin: AdvisorAdminService = Depends(get_advisor_admin_service),
) -> AdvisorDetail:
    advisor = await admin.get_advisor(advisor_id)
    return AdvisorDetail.from_advisor_with_link(advisor, admin.booking_link(advisor_id))


@router.post("/api/advisor/{advisor_id}/settings", response_model=SuccessResponse)
async def update_advisor_settings(
    advisor_id: str,
    body: AdvisorSettingsBody,
    admin: AdvisorAdminService = Depends(get_advisor_admin_service),
) -> SuccessResponse:
    await admin.update_settings(
        advisor_id,
        calendars=body.calendars,
        meeting_duration=body.meeting_duration,
        working_hours=body.working_hours,
    )
    return SuccessResponse()


@router.get("/api/advisor/{advisor_id}/calendars")
async def list_advisor_calendars(
    advisor_id: str,
    admin: AdvisorAdminService = Depends(get_advisor_admin_service),
) -> list[dict[str, Any]]:
    """Calendarios da conta Google conectada, como devolvidos pelo provider."""
    return await admin.list_calendars(advisor_id)
