"""Servicos de aplicacao.

Unidades reutilizaveis de orquestracao (sem IO direto).
Implementacoes concretas de IO ficam em app/infra/.
"""

from app.services.advisor_admin import AdvisorAdminService
from app.services.availability_service import AvailabilityService
from app.services.booking_service import BookingService
from app.services.runtime_config_service import RuntimeConfigService

__all__ = [
    "AdvisorAdminService",
    "AvailabilityService",
    "BookingService",
    "RuntimeConfigService",
]
