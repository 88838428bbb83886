"""Mapping from a target performance score to bounded setting values."""

from __future__ import annotations


def clamp(value: int, min_value: int, max_value: int) -> int:
    """Constrain value to the closed interval [min_value, max_value]."""
    return min(max_value, max(min_value, value))


def scale(target_performance: int) -> int:
    """Divide by ten, truncating toward zero (55 -> 5, -55 -> -5)."""
    quotient = abs(target_performance) // 10
    return quotient if target_performance >= 0 else -quotient


def derive(target_performance: int, min_value: int, max_value: int) -> int:
    """Value a setting with these bounds should take for a target score."""
    return clamp(scale(target_performance), min_value, max_value)


def startup_target(fps: int, threshold: int = 55, high: int = 60, low: int = 50) -> int:
    """Target for the one-shot optimization pass run at startup."""
    return high if fps > threshold else low


def realtime_target(
    fps: int,
    low_fps: int = 50,
    high_fps: int = 60,
    low_target: int = 40,
    high_target: int = 70,
) -> int | None:
    """Target for a real-time tuning step, or None when the frame rate is stable.

    Low frame rates lower quality, high ones raise it. Anything in
    [low_fps, high_fps] leaves the settings alone.
    """
    if fps < low_fps:
        return low_target
    if fps > high_fps:
        return high_target
    return None
