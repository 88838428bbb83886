"""Tuning orchestrator: samples performance and drives the settings registry."""

from __future__ import annotations

import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass

from gametune.config import Config
from gametune.logs import get_logger
from gametune.policy import realtime_target, scale, startup_target
from gametune.registry import Setting, SettingsRegistry
from gametune.sampler import PerformanceSample, PerformanceSampler

logger = get_logger("tuner")


class Benchmark:
    """Wall-clock timer usable as a context manager."""

    def __init__(self) -> None:
        self._start: float | None = None
        self._end: float | None = None

    def start(self) -> None:
        self._start = time.perf_counter()
        self._end = None

    def stop(self) -> None:
        self._end = time.perf_counter()

    @property
    def elapsed(self) -> float:
        """Seconds between start() and stop(), or until now if still running."""
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else time.perf_counter()
        return end - self._start

    def __enter__(self) -> Benchmark:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


@dataclass
class CycleResult:
    """What one tuning step observed and did."""

    sample: PerformanceSample
    target: int | None
    settings: list[Setting]

    @property
    def adjusted(self) -> bool:
        return self.target is not None


@dataclass
class BenchmarkResult:
    operation: str
    tasks: int
    elapsed: float


class Tuner:
    """Couples a sampler to a registry using the thresholds from Config."""

    def __init__(
        self,
        registry: SettingsRegistry,
        sampler: PerformanceSampler,
        config: Config,
        on_debug: Callable[[str], None] | None = None,
    ) -> None:
        self.registry = registry
        self.sampler = sampler
        self.config = config
        self._debug = on_debug

    def _dbg(self, msg: str) -> None:
        """Emit a debug message if debug callback is set."""
        if self._debug:
            self._debug(msg)

    def analyze(self) -> PerformanceSample:
        sample = self.sampler.sample()
        self._dbg(
            f"[dim]sample:[/dim] fps={sample.fps} cpu={sample.cpu_usage}% gpu={sample.gpu_usage}%"
        )
        return sample

    def optimize(self, target: int) -> list[Setting]:
        self.registry.optimize_all(target)
        settings = self.registry.list()
        for setting in settings:
            self._dbg(f"[green]optimized:[/green] {setting.name} -> {setting.value}")
        logger.info("Optimized %d settings for target %d", len(settings), target)
        return settings

    def update(self, name: str, value: int) -> Setting | None:
        setting = self.registry.update(name, value)
        if setting is None:
            self._dbg(f"[yellow]update ignored:[/yellow] unknown setting {name!r}")
            logger.info("Ignored update for unknown setting %s", name)
        else:
            self._dbg(f"[green]updated:[/green] {setting.name} -> {setting.value}")
            logger.info("Updated %s to %d", setting.name, setting.value)
        return setting

    def startup_cycle(self) -> CycleResult:
        """Sample once and optimize toward the high or low startup target."""
        sample = self.analyze()
        target = startup_target(
            sample.fps,
            threshold=self.config.startup_fps,
            high=self.config.startup_high,
            low=self.config.startup_low,
        )
        return CycleResult(sample=sample, target=target, settings=self.optimize(target))

    def realtime_cycle(self) -> CycleResult:
        """One real-time step. Settings change only when fps leaves the stable band."""
        sample = self.analyze()
        target = realtime_target(
            sample.fps,
            low_fps=self.config.low_fps,
            high_fps=self.config.high_fps,
            low_target=self.config.low_target,
            high_target=self.config.high_target,
        )
        if target is None:
            self._dbg(f"[dim]stable fps {sample.fps}, no adjustment[/dim]")
            logger.info("Stable FPS detected (%d). No adjustments needed.", sample.fps)
            return CycleResult(sample=sample, target=None, settings=self.registry.list())
        if sample.fps < self.config.low_fps:
            logger.info("Low FPS detected (%d). Adjusting settings...", sample.fps)
        else:
            logger.info("High FPS detected (%d). Enhancing quality...", sample.fps)
        return CycleResult(sample=sample, target=target, settings=self.optimize(target))

    def parallel_optimize(self, target: int, workers: int | None = None) -> BenchmarkResult:
        """Update each setting from its own worker task and time the batch.

        Each task writes ``target / 10`` (clamped) to one setting. Writes are
        serialized by the registry lock.
        """
        names = self.registry.names()
        raw = scale(target)
        with Benchmark() as bench, ThreadPoolExecutor(
            max_workers=workers or self.config.workers
        ) as pool:
            futures = [pool.submit(self.registry.update, name, raw) for name in names]
            wait(futures)
            for future in futures:
                future.result()
        self._dbg(f"[dim]parallel optimize:[/dim] {len(names)} tasks in {bench.elapsed:.4f}s")
        logger.info("Parallel Optimization completed in %.4f seconds.", bench.elapsed)
        return BenchmarkResult(operation="Parallel Optimization", tasks=len(names), elapsed=bench.elapsed)
