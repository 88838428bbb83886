"""Tests for the tuning orchestrator."""

from __future__ import annotations

from gametune.config import Config
from gametune.sampler import FixedSampler
from gametune.tuner import Benchmark, Tuner


def make_tuner(registry, fps, config=None, on_debug=None):
    return Tuner(registry, FixedSampler(fps), config or Config(), on_debug=on_debug)


# --- startup ---


def test_startup_cycle_high_fps(registry):
    result = make_tuner(registry, 60).startup_cycle()
    assert result.target == 60
    values = {s.name: s.value for s in result.settings}
    assert values == {"Resolution": 720, "Texture Quality": 5, "Shadow Quality": 4}


def test_startup_cycle_low_fps(registry):
    result = make_tuner(registry, 55).startup_cycle()
    assert result.target == 50
    assert registry.get("Texture Quality").value == 5


# --- real-time ---


def test_realtime_low_fps_adjusts(registry):
    result = make_tuner(registry, 45).realtime_cycle()
    assert result.adjusted
    assert result.target == 40
    assert registry.get("Shadow Quality").value == 4
    assert registry.get("Texture Quality").value == 4


def test_realtime_high_fps_adjusts(registry):
    result = make_tuner(registry, 65).realtime_cycle()
    assert result.target == 70


def test_realtime_stable_leaves_settings(registry):
    before = registry.list()
    result = make_tuner(registry, 55).realtime_cycle()
    assert not result.adjusted
    assert registry.list() == before


def test_realtime_uses_config_thresholds(registry):
    config = Config(low_fps=30, high_fps=90)
    result = make_tuner(registry, 45, config=config).realtime_cycle()
    assert not result.adjusted


# --- manual ---


def test_update_unknown_reports_debug(registry):
    messages: list[str] = []
    tuner = make_tuner(registry, 60, on_debug=messages.append)
    assert tuner.update("Bloom", 3) is None
    assert any("unknown setting" in m for m in messages)


def test_optimize_narrates_each_setting(registry):
    messages: list[str] = []
    make_tuner(registry, 60, on_debug=messages.append).optimize(35)
    assert sum("optimized" in m for m in messages) == 3


# --- parallel ---


def test_parallel_optimize_matches_update(registry):
    result = make_tuner(registry, 60).parallel_optimize(50, workers=2)
    assert result.tasks == 3
    assert result.elapsed >= 0
    values = {s.name: s.value for s in registry.list()}
    assert values == {"Resolution": 720, "Texture Quality": 5, "Shadow Quality": 4}


def test_parallel_optimize_default_workers(registry):
    result = make_tuner(registry, 60).parallel_optimize(30)
    assert result.operation == "Parallel Optimization"
    assert registry.get("Texture Quality").value == 3


# --- benchmark ---


def test_benchmark_measures_elapsed():
    bench = Benchmark()
    assert bench.elapsed == 0.0
    with bench:
        sum(range(1000))
    first = bench.elapsed
    assert first >= 0
    assert bench.elapsed == first
