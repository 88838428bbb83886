"""Tests for the optimization policy."""

from gametune.policy import clamp, derive, realtime_target, scale, startup_target


def test_clamp_inside_bounds():
    assert clamp(3, 1, 5) == 3


def test_clamp_edges():
    assert clamp(0, 1, 5) == 1
    assert clamp(9, 1, 5) == 5
    assert clamp(4, 4, 4) == 4


def test_scale_truncates_toward_zero():
    assert scale(55) == 5
    assert scale(-55) == -5
    assert scale(9) == 0
    assert scale(-9) == 0


def test_derive_clamps_high():
    assert derive(1000, 1, 5) == 5


def test_derive_clamps_low():
    assert derive(-50, 1, 5) == 1


def test_derive_within_bounds():
    assert derive(35, 1, 5) == 3


def test_derive_is_deterministic():
    assert derive(70, 1, 4) == derive(70, 1, 4) == 4


def test_startup_target():
    assert startup_target(56) == 60
    assert startup_target(55) == 50
    assert startup_target(40, threshold=30, high=90, low=10) == 90


def test_realtime_target_bands():
    assert realtime_target(49) == 40
    assert realtime_target(61) == 70
    assert realtime_target(50) is None
    assert realtime_target(60) is None
