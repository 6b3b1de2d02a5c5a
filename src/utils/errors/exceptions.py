"""Excecoes de dominio do agendamento e falhas de infraestrutura.

Toda `SchedulingError` carrega o status HTTP e uma mensagem curta, segura
para devolver ao cliente. Detalhes do provider ficam apenas nos logs.
"""

from __future__ import annotations


class SchedulingError(Exception):
    """Base para erros de agendamento expostos ao chamador."""

    status_code: int = 400
    default_message: str = "Request could not be processed"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code


class AdvisorNotFoundError(SchedulingError):
    """Consultor inexistente."""

    status_code = 404
    default_message = "Advisor not found"


class AdvisorNotConnectedError(SchedulingError):
    """Consultor sem credenciais de calendario validas."""

    default_message = "Advisor has not connected a calendar yet"


class NoCalendarsSelectedError(SchedulingError):
    """Consultor conectado, mas sem calendarios escolhidos."""

    default_message = "Advisor has not selected calendars to sync"


class BookingValidationError(SchedulingError):
    """Campo obrigatorio ausente no pedido."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}")
        self.field = field


class AdvisorAlreadyExistsError(SchedulingError):
    """Ja existe consultor com o mesmo id derivado do nome."""

    default_message = "An advisor with this name already exists"


class OAuthNotConfiguredError(SchedulingError):
    """Client OAuth do Google ainda nao configurado."""

    default_message = "Google OAuth credentials are not configured"


class AvailabilityFetchFailedError(SchedulingError):
    """Falha do provider ao consultar horarios ocupados."""

    status_code = 500
    default_message = "Failed to load availability"


class BookingCommitFailedError(SchedulingError):
    """Falha do provider ao criar o evento."""

    status_code = 500
    default_message = "Failed to create the booking"


class CalendarListFailedError(SchedulingError):
    """Falha do provider ao listar calendarios do consultor."""

    status_code = 500
    default_message = "Failed to load calendars"


class NotificationFailedError(Exception):
    """Falha na entrega do webhook; sempre tratada localmente."""


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitorias."""


class StoreUnavailableError(InfrastructureError):
    """Falha de leitura/escrita no store de consultores ou configuracao."""


class CalendarProviderError(InfrastructureError):
    """Falha do provider de calendario (HTTP, auth ou rede)."""

    def __init__(self, action: str, *, status_code: int | None = None) -> None:
        super().__init__(f"calendar_provider_error:{action}")
        self.action = action
        self.status_code = status_code
