"""Testes do rotulo de slot."""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from app.services.slot_display import format_slot_display, supported_locales

ZONE = ZoneInfo("Asia/Jerusalem")


def test_converts_to_service_timezone() -> None:
    start = datetime(2026, 10, 20, 6, 0, tzinfo=UTC)
    end = datetime(2026, 10, 20, 6, 30, tzinfo=UTC)

    label = format_slot_display(start, end, zone=ZONE, locale="en-US")

    assert label == "Tuesday, October 20, 2026 | 09:00 - 09:30"


def test_portuguese_labels() -> None:
    start = datetime(2026, 10, 21, 14, 0, tzinfo=ZONE)
    end = datetime(2026, 10, 21, 14, 30, tzinfo=ZONE)

    label = format_slot_display(start, end, zone=ZONE, locale="pt-BR")

    assert label == "quarta-feira, 21 de outubro de 2026 | 14:00 - 14:30"


def test_hebrew_is_the_default_locale() -> None:
    start = datetime(2026, 10, 19, 9, 0, tzinfo=ZONE)
    end = datetime(2026, 10, 19, 9, 30, tzinfo=ZONE)

    label = format_slot_display(start, end, zone=ZONE)

    assert label.startswith("יום שני, 19 ")
    assert label.endswith("| 09:00 - 09:30")


def test_unknown_locale_falls_back_to_english() -> None:
    start = datetime(2026, 10, 19, 9, 0, tzinfo=ZONE)
    end = datetime(2026, 10, 19, 9, 30, tzinfo=ZONE)

    assert format_slot_display(start, end, zone=ZONE, locale="xx-XX").startswith("Monday")
    assert {"he-IL", "pt-BR", "en-US"} <= supported_locales()
