import math

import pytest

from app.core.metrics import (
    count_calls,
    get_counters,
    get_last_runs,
    get_metrics,
    metrics_registry,
    set_instrumentation_enabled,
    timeit,
    timer,
)


def test_timer_records_last_run():
    with timer("metrics.test.timer"):
        pass
    payload = get_last_runs()["metrics.test.timer"]
    assert payload["duration_ms"] >= 0.0
    assert "timestamp" in payload


def test_timeit_records_even_when_function_raises():
    @timeit("metrics.test.failing")
    def _fn() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        _fn()
    assert get_metrics()["metrics.test.failing"]["count"] == 1.0


def test_registry_tracks_mean_and_stddev():
    metrics_registry.record("metrics.var", 10.0)
    metrics_registry.record("metrics.var", 30.0)
    entry = get_metrics()["metrics.var"]
    assert entry["count"] == 2.0
    assert entry["avg_ms"] == pytest.approx(20.0)
    assert entry["max_ms"] == 30.0
    assert entry["stddev_ms"] == pytest.approx(math.sqrt(200.0))


def test_instrumentation_toggle_disables_counters():
    @count_calls("metrics.test.calls")
    def _fn() -> int:
        return 1

    set_instrumentation_enabled(False)
    try:
        assert _fn() == 1
        assert "metrics.test.calls" not in get_counters()
    finally:
        set_instrumentation_enabled(True)
    _fn()
    assert get_counters()["metrics.test.calls"] == 1.0
