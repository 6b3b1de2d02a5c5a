"""Testes do correlation_id por contexto."""

from __future__ import annotations

import logging

from app.observability import (
    generate_correlation_id,
    get_correlation_id,
    record_booking,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset_restore_previous_value() -> None:
    outer = set_correlation_id("outer")
    inner = set_correlation_id("inner")

    assert get_correlation_id() == "inner"
    reset_correlation_id(inner)
    assert get_correlation_id() == "outer"
    reset_correlation_id(outer)


def test_missing_or_oversized_ids_are_replaced() -> None:
    token = set_correlation_id(None)
    generated = get_correlation_id()
    reset_correlation_id(token)

    token = set_correlation_id("x" * 500)
    replaced = get_correlation_id()
    reset_correlation_id(token)

    assert len(generated) == 36
    assert len(replaced) == 36
    assert generated != replaced
    assert len(generate_correlation_id()) == 36


def test_metrics_are_structured_log_lines(caplog) -> None:
    token = set_correlation_id("corr-metrics")
    try:
        with caplog.at_level(logging.INFO, logger="app.observability.metrics"):
            record_booking("dana", "created")
    finally:
        reset_correlation_id(token)

    record = caplog.records[-1]
    assert record.getMessage() == "metric_booking"
    assert record.result == "created"
    assert record.correlation_id == "corr-metrics"
