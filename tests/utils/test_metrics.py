"""Tests for MetricsStopWatch."""

import logging
from unittest.mock import patch

import pytest

from src.utils.metrics import MetricsStopWatch


def _timing_records(caplog) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.getMessage() == "Elapsed time"]


def test_context_manager_logs_label_and_elapsed(caplog) -> None:
    """Test that leaving the block logs one timing record."""
    with patch("src.utils.metrics.time.perf_counter", side_effect=[10.0, 10.0, 10.25]):
        with caplog.at_level(logging.INFO, logger="src.utils.metrics"):
            with MetricsStopWatch("WorkshopDao::read"):
                pass

    records = _timing_records(caplog)
    assert len(records) == 1
    assert records[0].context == {"label": "WorkshopDao::read", "elapsed_ms": 250.0}


def test_logs_on_failure_and_does_not_swallow(caplog) -> None:
    """Test that the timing record is emitted and the error propagates."""
    with caplog.at_level(logging.INFO, logger="src.utils.metrics"):
        with pytest.raises(KeyError):
            with MetricsStopWatch("WorkshopDao::update"):
                raise KeyError("boom")

    records = _timing_records(caplog)
    assert [r.context["label"] for r in records] == ["WorkshopDao::update"]


def test_log_elapsed_time_with_explicit_label(caplog) -> None:
    """Test manual use with a label given at emission time."""
    stopwatch = MetricsStopWatch()

    with caplog.at_level(logging.INFO, logger="src.utils.metrics"):
        elapsed = stopwatch.log_elapsed_time("manual")

    assert elapsed >= 0
    assert _timing_records(caplog)[0].context["label"] == "manual"


def test_logging_failure_does_not_break_operation() -> None:
    """Test that a broken log handler cannot fail the timed block."""

    class ExplodingHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            raise RuntimeError("sink down")

    metrics_logger = logging.getLogger("src.utils.metrics")
    handler = ExplodingHandler()
    metrics_logger.addHandler(handler)
    previous = logging.raiseExceptions
    logging.raiseExceptions = False
    try:
        with MetricsStopWatch("WorkshopDao::read"):
            result = 42
    finally:
        logging.raiseExceptions = previous
        metrics_logger.removeHandler(handler)

    assert result == 42
