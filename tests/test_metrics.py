"""Tests for the MetricsCollector."""

from __future__ import annotations

from villageinfo.services.metrics import MetricsCollector


def test_inc_request():
    m = MetricsCollector()
    m.inc_request(200)
    m.inc_request(200)
    m.inc_request(404)
    assert m.total_requests == 3
    assert m.status_codes == {200: 2, 404: 1}


def test_dataset_counters():
    m = MetricsCollector()
    m.inc_dataset_cache(True)
    m.inc_dataset_cache(False)
    m.inc_dataset_cache(False)
    m.inc_dataset_read()
    assert m.dataset_cache_hits == 1
    assert m.dataset_cache_misses == 2
    assert m.dataset_reads == 1


def test_upstream_counters():
    m = MetricsCollector()
    m.inc_upstream(True)
    m.inc_upstream(False)
    snap = m.snapshot()
    assert snap["upstream"] == {"ok": 1, "failures": 1}


def test_latency_percentiles():
    m = MetricsCollector()
    for ms in range(1, 101):
        m.record_latency(float(ms))
    p = m.snapshot()["latency_ms"]
    assert p["p50"] == 51.0
    assert p["p99"] == 100.0


def test_latency_samples_bounded():
    m = MetricsCollector(_MAX_LATENCY_SAMPLES=10)
    for ms in range(11):
        m.record_latency(float(ms))
    assert len(m._latencies) == 5
    assert m._latencies[-1] == 10.0


def test_empty_percentiles():
    assert MetricsCollector().snapshot()["latency_ms"] == {
        "p50": 0.0,
        "p95": 0.0,
        "p99": 0.0,
    }


def test_reset():
    m = MetricsCollector()
    m.inc_request(500)
    m.inc_upstream(False)
    m.record_latency(3.0)
    m.reset()
    snap = m.snapshot()
    assert snap["total_requests"] == 0
    assert snap["status_codes"] == {}
    assert snap["upstream"]["failures"] == 0
    assert snap["latency_ms"]["p50"] == 0.0
