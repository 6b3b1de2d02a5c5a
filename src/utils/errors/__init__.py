"""Excecoes utilitarias compartilhadas."""

from .exceptions import (
    AdvisorAlreadyExistsError,
    AdvisorNotConnectedError,
    AdvisorNotFoundError,
    AvailabilityFetchFailedError,
    BookingCommitFailedError,
    BookingValidationError,
    CalendarListFailedError,
    CalendarProviderError,
    InfrastructureError,
    NoCalendarsSelectedError,
    NotificationFailedError,
    OAuthNotConfiguredError,
    SchedulingError,
    StoreUnavailableError,
)

__all__ = [
    "AdvisorAlreadyExistsError",
    "AdvisorNotConnectedError",
    "AdvisorNotFoundError",
    "AvailabilityFetchFailedError",
    "BookingCommitFailedError",
    "BookingValidationError",
    "CalendarListFailedError",
    "CalendarProviderError",
    "InfrastructureError",
    "NoCalendarsSelectedError",
    "NotificationFailedError",
    "OAuthNotConfiguredError",
    "SchedulingError",
    "StoreUnavailableError",
]
