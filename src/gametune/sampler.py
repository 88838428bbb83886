"""Performance samplers that feed the tuning cycle.

Nothing here measures real hardware. The simulated sampler fabricates
plausible numbers from an injected random generator, and the fixed sampler
replays scripted frame rates.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from pydantic import BaseModel

DEFAULT_GPU_MODEL = "NVIDIA GeForce RTX 3080"


class AdvancedMetrics(BaseModel):
    """Optional hardware details attached to a sample."""

    gpu_model: str = "Unknown GPU"
    available_memory_mb: int = 0


class PerformanceSample(BaseModel):
    """One round of performance numbers."""

    fps: int
    cpu_usage: int = 0
    gpu_usage: int = 0
    advanced: AdvancedMetrics | None = None


@runtime_checkable
class PerformanceSampler(Protocol):
    """Anything that can produce a performance sample."""

    def sample(self) -> PerformanceSample: ...


class SimulatedSampler:
    """Random metrics: fps 50-70, CPU 40-60 %, GPU 50-70 %."""

    def __init__(self, rng: random.Random | None = None, advanced: bool = False) -> None:
        self.rng = rng or random.Random()
        self.advanced = advanced

    def sample(self) -> PerformanceSample:
        fps = 60 + self.rng.randint(-10, 10)
        cpu = 40 + self.rng.randint(0, 20)
        gpu = 50 + self.rng.randint(0, 20)
        extra = None
        if self.advanced:
            extra = AdvancedMetrics(
                gpu_model=DEFAULT_GPU_MODEL,
                available_memory_mb=8192 + self.rng.randint(0, 2048),
            )
        return PerformanceSample(fps=fps, cpu_usage=cpu, gpu_usage=gpu, advanced=extra)


class FixedSampler:
    """Replays frame rates in order, repeating the last one once exhausted."""

    def __init__(self, fps: int | Iterable[int], cpu_usage: int = 50, gpu_usage: int = 60) -> None:
        self._fps = [fps] if isinstance(fps, int) else list(fps)
        if not self._fps:
            raise ValueError("FixedSampler needs at least one frame rate")
        self.cpu_usage = cpu_usage
        self.gpu_usage = gpu_usage
        self._index = 0

    def sample(self) -> PerformanceSample:
        fps = self._fps[min(self._index, len(self._fps) - 1)]
        self._index += 1
        return PerformanceSample(fps=fps, cpu_usage=self.cpu_usage, gpu_usage=self.gpu_usage)
