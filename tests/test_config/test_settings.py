"""Testes de carregamento e validação das settings."""

from __future__ import annotations

import pytest

from config.settings.base.core import BaseSettings, _load_base_from_env
from config.settings.base.store import StoreSettings, _load_store_from_env
from config.settings.calendar import _load_calendar_from_env
from config.settings.webhook import WebhookSettings, _load_webhook_from_env


class TestBaseSettings:
    def test_base_url_falls_back_to_render_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BASE_URL", raising=False)
        monkeypatch.setenv("RENDER_EXTERNAL_URL", "https://advisors.onrender.com/")

        settings = _load_base_from_env()

        assert settings.base_url == "https://advisors.onrender.com"

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("BASE_URL", "RENDER_EXTERNAL_URL", "ENVIRONMENT", "LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)

        settings = _load_base_from_env()

        assert settings.base_url == "http://localhost:3000"
        assert settings.is_development
        assert settings.log_level == "INFO"
        assert settings.validate() == []

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        assert _load_base_from_env().is_production

    def test_invalid_base_url(self) -> None:
        errors = BaseSettings(base_url="localhost:3000").validate()
        assert any("BASE_URL" in error for error in errors)


class TestCalendarSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("CALENDAR_TIMEZONE", "CALENDAR_EXCLUDED_WEEKDAYS", "CALENDAR_DISPLAY_LOCALE"):
            monkeypatch.delenv(key, raising=False)

        settings = _load_calendar_from_env()

        assert settings.calendar_timezone == "Asia/Jerusalem"
        assert settings.calendar_display_locale == "he-IL"
        assert settings.calendar_excluded_weekdays == frozenset({4, 5})
        assert settings.validate_settings() == []

    def test_parses_excluded_weekdays(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALENDAR_EXCLUDED_WEEKDAYS", "5, 6")
        assert _load_calendar_from_env().calendar_excluded_weekdays == frozenset({5, 6})

        monkeypatch.setenv("CALENDAR_EXCLUDED_WEEKDAYS", "")
        assert _load_calendar_from_env().calendar_excluded_weekdays == frozenset()

    def test_validation_errors(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALENDAR_TIMEZONE", "Mars/Olympus")
        monkeypatch.setenv("CALENDAR_BUSINESS_START_HOUR", "18")
        monkeypatch.setenv("CALENDAR_BUSINESS_END_HOUR", "9")
        monkeypatch.setenv("CALENDAR_EXCLUDED_WEEKDAYS", "7")

        errors = _load_calendar_from_env().validate_settings()

        assert len(errors) == 3


class TestStoreSettings:
    def test_defaults_to_file_backend(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ADVISOR_STORE_BACKEND", raising=False)
        settings = _load_store_from_env()
        assert settings.backend == "file"
        assert settings.advisor_store_path == "advisors.json"

    def test_redis_requires_url(self) -> None:
        errors = StoreSettings(backend="redis", redis_url="").validate(BaseSettings())
        assert errors == ["REDIS_URL obrigatório quando ADVISOR_STORE_BACKEND=redis"]

    def test_memory_forbidden_outside_development(self) -> None:
        errors = StoreSettings(backend="memory").validate(BaseSettings(environment="production"))
        assert any("memory" in error for error in errors)

    def test_unknown_backend_falls_back_to_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ADVISOR_STORE_BACKEND", "firestore")
        assert _load_store_from_env().backend == "file"


class TestWebhookSettings:
    def test_loads_url_and_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEBHOOK_URL", " https://hooks.example.com ")
        monkeypatch.setenv("WEBHOOK_TIMEOUT_SECONDS", "2.5")

        settings = _load_webhook_from_env()

        assert settings.url == "https://hooks.example.com"
        assert settings.timeout_seconds == 2.5
        assert settings.validate() == []

    def test_validation(self) -> None:
        errors = WebhookSettings(url="ftp://x", timeout_seconds=0).validate()
        assert len(errors) == 2
