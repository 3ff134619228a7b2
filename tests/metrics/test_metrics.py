"""Tests for `schedgraph.metrics` counters and timing."""

import time

import pytest

from schedgraph.metrics import Counter, Metrics


def test_unseen_counter_is_zero():
    metrics = Metrics()
    for counter in Counter:
        assert metrics.get(counter) == 0


def test_increment_default_and_amount():
    metrics = Metrics()
    metrics.increment(Counter.VISITS)
    metrics.increment(Counter.VISITS)
    metrics.increment(Counter.RELAXATIONS, 5)
    assert metrics.get(Counter.VISITS) == 2
    assert metrics.get(Counter.RELAXATIONS) == 5


def test_string_names_accepted():
    metrics = Metrics()
    metrics.increment("pushes", 3)
    assert metrics.get(Counter.PUSHES) == 3
    assert metrics.get("pushes") == 3


def test_unknown_name_rejected_on_increment():
    metrics = Metrics()
    with pytest.raises(KeyError):
        metrics.increment("dfs_calls")
    assert metrics.as_dict(elapsed=False) == {}


def test_unknown_name_reads_zero():
    metrics = Metrics()
    metrics.increment(Counter.VISITS)
    assert metrics.get("recursion_depth") == 0
    assert metrics.get("dfs_calls") == 0
    assert metrics.get(Counter.VISITS) == 1


def test_timer_elapsed():
    metrics = Metrics()
    metrics.start_timer()
    time.sleep(0.002)
    metrics.stop_timer()
    assert metrics.elapsed_ns >= 1_000_000
    assert metrics.elapsed_ms == pytest.approx(metrics.elapsed_ns / 1_000_000.0)


def test_elapsed_zero_without_timer():
    assert Metrics().elapsed_ns == 0
    assert Metrics().elapsed_ms == 0.0


def test_reset_clears_everything():
    metrics = Metrics()
    metrics.start_timer()
    metrics.increment(Counter.POPS)
    metrics.stop_timer()
    metrics.reset()
    assert metrics.get(Counter.POPS) == 0
    assert metrics.elapsed_ns == 0
    assert metrics.as_dict(elapsed=False) == {}


def test_summary_and_as_dict():
    metrics = Metrics()
    metrics.increment(Counter.POPS, 2)
    metrics.increment(Counter.PUSHES, 3)
    summary = metrics.summary()
    assert summary.startswith("Execution Time: ")
    assert "  pushes: 3" in summary
    assert "  pops: 2" in summary
    assert "visits" not in summary

    data = metrics.as_dict()
    # Enum order, not insertion order
    assert list(data) == ["pushes", "pops", "elapsed_ms"]
    assert data["pops"] == 2
