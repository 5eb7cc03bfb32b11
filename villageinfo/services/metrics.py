"""Thread-safe in-memory counters for the /metrics endpoint."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


@dataclass
class MetricsCollector:
    """Request, dataset-cache and upstream counters plus latency samples.

    The latency list is capped at ``_MAX_LATENCY_SAMPLES``; past that only
    the newest half is kept.
    """

    _MAX_LATENCY_SAMPLES: int = field(default=10_000, repr=False)

    total_requests: int = field(default=0, init=False)
    status_codes: dict[int, int] = field(default_factory=dict, init=False)
    dataset_cache_hits: int = field(default=0, init=False)
    dataset_cache_misses: int = field(default=0, init=False)
    dataset_reads: int = field(default=0, init=False)
    upstream_ok: int = field(default=0, init=False)
    upstream_failures: int = field(default=0, init=False)

    _latencies: list[float] = field(default_factory=list, init=False, repr=False)

    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)
    _start_time: float = field(default_factory=time.monotonic, init=False, repr=False)

    def inc_request(self, status_code: int) -> None:
        with self._lock:
            self.total_requests += 1
            self.status_codes[status_code] = self.status_codes.get(status_code, 0) + 1

    def inc_dataset_cache(self, hit: bool) -> None:
        with self._lock:
            if hit:
                self.dataset_cache_hits += 1
            else:
                self.dataset_cache_misses += 1

    def inc_dataset_read(self) -> None:
        with self._lock:
            self.dataset_reads += 1

    def inc_upstream(self, success: bool) -> None:
        with self._lock:
            if success:
                self.upstream_ok += 1
            else:
                self.upstream_failures += 1

    def record_latency(self, ms: float) -> None:
        with self._lock:
            self._latencies.append(ms)
            if len(self._latencies) > self._MAX_LATENCY_SAMPLES:
                self._latencies = self._latencies[-(self._MAX_LATENCY_SAMPLES // 2):]

    def _percentiles_unlocked(self) -> dict[str, float]:
        if not self._latencies:
            return {"p50": 0.0, "p95": 0.0, "p99": 0.0}
        s = sorted(self._latencies)
        last = len(s) - 1
        return {
            name: round(s[int(min(len(s) * q, last))], 2)
            for name, q in (("p50", 0.50), ("p95", 0.95), ("p99", 0.99))
        }

    def uptime_seconds(self) -> float:
        return round(time.monotonic() - self._start_time, 2)

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "uptime_seconds": round(time.monotonic() - self._start_time, 2),
                "total_requests": self.total_requests,
                "status_codes": dict(self.status_codes),
                "dataset": {
                    "reads": self.dataset_reads,
                    "cache_hits": self.dataset_cache_hits,
                    "cache_misses": self.dataset_cache_misses,
                },
                "upstream": {
                    "ok": self.upstream_ok,
                    "failures": self.upstream_failures,
                },
                "latency_ms": self._percentiles_unlocked(),
            }

    def reset(self) -> None:
        with self._lock:
            self.total_requests = 0
            self.status_codes.clear()
            self.dataset_cache_hits = 0
            self.dataset_cache_misses = 0
            self.dataset_reads = 0
            self.upstream_ok = 0
            self.upstream_failures = 0
            self._latencies.clear()
            self._start_time = time.monotonic()


metrics = MetricsCollector()
