"""Testes do modelo de consultor e da derivacao de id."""

from __future__ import annotations

from datetime import UTC, datetime

from app.domain.advisor import Advisor, CalendarRef, WorkingHours, derive_advisor_id


class TestDeriveAdvisorId:
    def test_lowercases_and_replaces_spaces(self) -> None:
        assert derive_advisor_id("Dana Levi") == "dana-levi"

    def test_collapses_and_strips_dashes(self) -> None:
        assert derive_advisor_id("  John -- O'Brien!  ") == "john-o-brien"

    def test_keeps_hebrew_letters(self) -> None:
        assert derive_advisor_id("דנה לוי") == "דנה-לוי"

    def test_falls_back_to_timestamp_when_nothing_survives(self) -> None:
        now = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
        assert derive_advisor_id("!!!", now=now) == f"advisor-{int(now.timestamp() * 1000)}"


class TestAdvisor:
    def test_defaults_for_new_advisor(self) -> None:
        advisor = Advisor(id="dana", name="Dana")
        assert advisor.is_connected is False
        assert advisor.calendars == []
        assert advisor.meeting_duration == 30
        assert advisor.working_hours == WorkingHours(start=9, end=17)

    def test_is_connected_requires_credentials(self) -> None:
        assert Advisor(id="a", name="A", credentials={"token": "x"}).is_connected is True
        assert Advisor(id="a", name="A", credentials={}).is_connected is False

    def test_calendar_ref_accepts_name_alias(self) -> None:
        ref = CalendarRef.model_validate({"id": "work@example.com", "name": "Work"})
        assert ref.summary == "Work"

    def test_record_keeps_calendars(self) -> None:
        advisor = Advisor(
            id="dana",
            name="Dana",
            calendars=[CalendarRef(id="primary", summary="Main")],
        )
        restored = Advisor.from_record(advisor.to_record())
        assert restored.calendar_ids == ["primary"]
