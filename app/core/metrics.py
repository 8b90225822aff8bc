from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import wraps
from math import sqrt
from time import perf_counter
from typing import Any, Callable, Dict, Mapping, TypeVar, cast

from app.core.config import settings

_F = TypeVar("_F", bound=Callable[..., Any])


@dataclass(slots=True)
class TimingStats:
    """Running aggregates for a timing label (Welford variance)."""

    count: float = 0.0
    total_ms: float = 0.0
    max_ms: float = 0.0
    avg_ms: float = 0.0
    stddev_ms: float = 0.0
    _m2: float = 0.0

    def update(self, elapsed_ms: float) -> None:
        value = float(elapsed_ms)
        self.count += 1.0
        self.total_ms += value
        self.max_ms = max(self.max_ms, value)

        delta = value - self.avg_ms
        self.avg_ms += delta / self.count
        self._m2 += delta * (value - self.avg_ms)
        variance = self._m2 / (self.count - 1.0) if self.count > 1.0 else 0.0
        self.stddev_ms = sqrt(variance) if variance > 0.0 else 0.0

    def snapshot(self) -> Dict[str, float]:
        return {
            "count": self.count,
            "total_ms": self.total_ms,
            "max_ms": self.max_ms,
            "avg_ms": self.avg_ms,
            "stddev_ms": self.stddev_ms,
        }


@dataclass(slots=True)
class LastRunMetadata:
    timestamp: str
    duration_ms: float
    metadata: Dict[str, Any] = field(default_factory=dict)

    def snapshot(self) -> Dict[str, Any]:
        return {"timestamp": self.timestamp, "duration_ms": self.duration_ms, **self.metadata}


class _MetricsRegistry:
    """Thread-safe in-process registry of timings, counters and last runs."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._timings: Dict[str, TimingStats] = {}
        self._counters: Dict[str, float] = {}
        self._last_runs: Dict[str, LastRunMetadata] = {}

    def record(self, label: str, elapsed_ms: float, *, metadata: Mapping[str, Any] | None = None) -> None:
        if not label:
            return
        with self._lock:
            self._timings.setdefault(label, TimingStats()).update(elapsed_ms)
            self._last_runs[label] = LastRunMetadata(
                timestamp=datetime.now(timezone.utc).isoformat(),
                duration_ms=float(elapsed_ms),
                metadata=dict(metadata or {}),
            )

    def inc(self, label: str, amount: float = 1.0) -> None:
        if not label:
            return
        with self._lock:
            self._counters[label] = self._counters.get(label, 0.0) + float(amount)

    def snapshot(self) -> Dict[str, Dict[str, float]]:
        with self._lock:
            return {label: stats.snapshot() for label, stats in self._timings.items()}

    def counters_snapshot(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._counters)

    def last_runs_snapshot(self) -> Dict[str, Dict[str, Any]]:
        with self._lock:
            return {label: run.snapshot() for label, run in self._last_runs.items()}

    def reset(self) -> None:
        with self._lock:
            self._timings.clear()
            self._counters.clear()
            self._last_runs.clear()


metrics_registry = _MetricsRegistry()

_INSTRUMENTATION_ENABLED: bool = settings.metrics_enabled


def set_instrumentation_enabled(enabled: bool) -> None:
    global _INSTRUMENTATION_ENABLED
    _INSTRUMENTATION_ENABLED = bool(enabled)


def instrumentation_enabled() -> bool:
    return _INSTRUMENTATION_ENABLED


@contextmanager
def timer(label: str):
    """Context manager to time a code block and record it under `label`."""
    if not instrumentation_enabled():
        yield
        return
    t0 = perf_counter()
    try:
        yield
    finally:
        metrics_registry.record(label, (perf_counter() - t0) * 1000.0)


def timeit(label: str) -> Callable[[_F], _F]:
    """Decorator to time a function and record under `label`."""

    def _wrap(func: _F) -> _F:
        @wraps(func)
        def _inner(*args: Any, **kwargs: Any):
            if not instrumentation_enabled():
                return func(*args, **kwargs)
            t0 = perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                metrics_registry.record(label, (perf_counter() - t0) * 1000.0)

        return cast(_F, _inner)

    return _wrap


def count_calls(label: str) -> Callable[[_F], _F]:
    """Decorator that increments a counter each time the function is invoked."""

    def _wrap(func: _F) -> _F:
        @wraps(func)
        def _inner(*args: Any, **kwargs: Any):
            if instrumentation_enabled():
                metrics_registry.inc(label)
            return func(*args, **kwargs)

        return cast(_F, _inner)

    return _wrap


def get_metrics() -> Dict[str, Dict[str, float]]:
    return metrics_registry.snapshot()


def get_counters() -> Dict[str, float]:
    return metrics_registry.counters_snapshot()


def get_last_runs() -> Dict[str, Dict[str, Any]]:
    return metrics_registry.last_runs_snapshot()


__all__ = [
    "timer",
    "timeit",
    "count_calls",
    "get_metrics",
    "get_counters",
    "get_last_runs",
    "metrics_registry",
    "set_instrumentation_enabled",
    "instrumentation_enabled",
]
