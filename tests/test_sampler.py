"""Tests for the performance samplers."""

import random

import pytest

from gametune.sampler import FixedSampler, PerformanceSampler, SimulatedSampler


def test_simulated_ranges():
    sampler = SimulatedSampler(rng=random.Random(7))
    for _ in range(200):
        s = sampler.sample()
        assert 50 <= s.fps <= 70
        assert 40 <= s.cpu_usage <= 60
        assert 50 <= s.gpu_usage <= 70
        assert s.advanced is None


def test_simulated_is_reproducible_with_seed():
    a = SimulatedSampler(rng=random.Random(3), advanced=True)
    b = SimulatedSampler(rng=random.Random(3), advanced=True)
    assert [a.sample() for _ in range(5)] == [b.sample() for _ in range(5)]


def test_advanced_metrics():
    s = SimulatedSampler(rng=random.Random(1), advanced=True).sample()
    assert s.advanced is not None
    assert s.advanced.gpu_model == "NVIDIA GeForce RTX 3080"
    assert 8192 <= s.advanced.available_memory_mb <= 10240


def test_fixed_sampler_replays_then_repeats():
    sampler = FixedSampler([45, 65])
    assert [sampler.sample().fps for _ in range(4)] == [45, 65, 65, 65]


def test_fixed_sampler_requires_values():
    with pytest.raises(ValueError):
        FixedSampler([])


def test_samplers_satisfy_protocol():
    assert isinstance(SimulatedSampler(), PerformanceSampler)
    assert isinstance(FixedSampler(60), PerformanceSampler)
