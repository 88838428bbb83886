"""Entry point for `python -m gametune` and the `gametune` CLI command."""

from __future__ import annotations

import contextlib
import random
from typing import Optional

import typer

from gametune.config import DEFAULT_CONFIG_PATH, DEFAULT_LOG_PATH, DEFAULT_SETTINGS_PATH, Config
from gametune.errors import StorageUnavailable, UnknownTweak
from gametune.logs import configure_logging, get_logger, log_error
from gametune.registry import SettingsRegistry
from gametune.sampler import PerformanceSample, SimulatedSampler
from gametune.storage import ConfigFile, SettingsFile
from gametune.tuner import Tuner
from gametune.tweaks import default_catalog

app = typer.Typer(add_completion=False, no_args_is_help=True)
logger = get_logger("cli")


@app.callback()
def main(
    ctx: typer.Context,
    settings_file: str = typer.Option(DEFAULT_SETTINGS_PATH, help="Settings file (name=value)"),
    config_file: str = typer.Option(DEFAULT_CONFIG_PATH, help="Config file (key=value)"),
    log_file: str = typer.Option(DEFAULT_LOG_PATH, help="Append-only log file"),
) -> None:
    """Gametune: bounded game settings tuned from a performance score."""
    try:
        configure_logging(log_file)
    except OSError as exc:
        typer.echo(f"ERROR: Failed to open log file: {log_file} ({exc})", err=True)
        raise typer.Exit(1) from exc
    ctx.obj = Config(settings_path=settings_file, config_path=config_file, log_path=log_file)


def _load(config: Config) -> SettingsRegistry:
    """Seed a registry from config and overlay saved values when available."""
    registry = config.build_registry()
    try:
        report = SettingsFile(config.settings_path).load(registry)
    except StorageUnavailable as exc:
        logger.warning("Keeping default settings: %s", exc)
        typer.echo(f"Warning: keeping default settings ({exc})", err=True)
        return registry
    logger.info("Settings loaded from %s", config.settings_path)
    if report.skipped:
        logger.info("Skipped %d malformed line(s)", report.skipped)
    return registry


def _save(config: Config, registry: SettingsRegistry) -> None:
    try:
        SettingsFile(config.settings_path).save(registry)
    except StorageUnavailable as exc:
        log_error(logger, str(exc))
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(1) from exc
    logger.info("Settings saved to %s", config.settings_path)
    typer.echo(f"Settings saved to {config.settings_path}")


def _mark_run(config: Config) -> None:
    """Record a successful run in the config file."""
    store = ConfigFile(config.config_path)
    with contextlib.suppress(StorageUnavailable):
        store.load()
    store.set("last_run", "successful")
    try:
        store.save()
    except StorageUnavailable as exc:
        log_error(logger, str(exc))
        return
    logger.info("Configuration saved to %s", config.config_path)


def _print_settings(registry: SettingsRegistry) -> None:
    typer.echo("Current Settings:")
    for setting in registry.list():
        typer.echo(f"- {setting.name}: {setting.value}")


def _print_sample(sample: PerformanceSample) -> None:
    typer.echo("Performance Analysis:")
    typer.echo(f"- FPS: {sample.fps}")
    typer.echo(f"- CPU Usage: {sample.cpu_usage}%")
    typer.echo(f"- GPU Usage: {sample.gpu_usage}%")
    if sample.advanced is not None:
        typer.echo(f"- GPU Model: {sample.advanced.gpu_model}")
        typer.echo(f"- Available Memory: {sample.advanced.available_memory_mb} MB")


def _sampler(seed: Optional[int], advanced: bool = False) -> SimulatedSampler:
    return SimulatedSampler(rng=random.Random(seed), advanced=advanced)


@app.command()
def menu(
    ctx: typer.Context,
    debug: bool = typer.Option(False, help="Write a debug trace to gametune_debug.log"),
) -> None:
    """Open the interactive menu."""
    from gametune.app import GametuneApp

    config: Config = ctx.obj
    logger.info("Starting the interactive menu")
    tui = GametuneApp(config=config, debug=debug)
    tui.run()
    _mark_run(config)


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the current settings."""
    _print_settings(_load(ctx.obj))


@app.command()
def optimize(
    ctx: typer.Context,
    target: int = typer.Argument(..., help="Target performance score"),
) -> None:
    """Set every setting from a target performance score and save."""
    config: Config = ctx.obj
    if not config.target_in_range(target):
        typer.echo(
            f"Target must be between {config.min_target} and {config.max_target}.", err=True
        )
        raise typer.Exit(2)
    registry = _load(config)
    tuner = Tuner(registry, _sampler(None), config)
    for setting in tuner.optimize(target):
        typer.echo(f"Optimized {setting.name} to {setting.value}")
    _save(config, registry)
    _mark_run(config)


@app.command("set")
def set_value(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Setting name"),
    value: int = typer.Argument(..., help="New value, clamped into the setting's range"),
) -> None:
    """Update one setting and save."""
    config: Config = ctx.obj
    registry = _load(config)
    setting = Tuner(registry, _sampler(None), config).update(name, value)
    if setting is None:
        typer.echo(f"No setting named {name!r}; nothing changed.")
        return
    typer.echo(f"Updated {setting.name} to {setting.value}")
    _save(config, registry)
    _mark_run(config)


@app.command()
def analyze(
    advanced: bool = typer.Option(False, help="Include GPU model and memory"),
    seed: Optional[int] = typer.Option(None, help="Seed for the simulated metrics"),
) -> None:
    """Print one simulated performance sample."""
    _print_sample(_sampler(seed, advanced).sample())


@app.command()
def startup(
    ctx: typer.Context,
    seed: Optional[int] = typer.Option(None, help="Seed for the simulated metrics"),
) -> None:
    """Analyze once, optimize toward the startup target, and save."""
    config: Config = ctx.obj
    registry = _load(config)
    result = Tuner(registry, _sampler(seed), config).startup_cycle()
    _print_sample(result.sample)
    typer.echo(f"Target performance: {result.target}")
    for setting in result.settings:
        typer.echo(f"Optimized {setting.name} to {setting.value}")
    _save(config, registry)
    _mark_run(config)


@app.command()
def tune(
    ctx: typer.Context,
    cycles: int = typer.Option(1, min=1, help="Number of real-time tuning steps"),
    seed: Optional[int] = typer.Option(None, help="Seed for the simulated metrics"),
) -> None:
    """Run real-time tuning steps and save the result."""
    config: Config = ctx.obj
    registry = _load(config)
    tuner = Tuner(registry, _sampler(seed), config)
    logger.info("Entering real-time optimization mode...")
    for _ in range(cycles):
        result = tuner.realtime_cycle()
        fps = result.sample.fps
        if result.target is None:
            typer.echo(f"Stable FPS detected ({fps}). No adjustments needed.")
        elif fps < config.low_fps:
            typer.echo(f"Low FPS detected ({fps}). Adjusting settings...")
        else:
            typer.echo(f"High FPS detected ({fps}). Enhancing quality...")
    _print_settings(registry)
    _save(config, registry)
    _mark_run(config)


@app.command()
def parallel(
    ctx: typer.Context,
    target: int = typer.Argument(..., help="Target performance score"),
    workers: Optional[int] = typer.Option(None, min=1, help="Worker threads"),
) -> None:
    """Update every setting from worker threads and report the timing."""
    config: Config = ctx.obj
    registry = _load(config)
    result = Tuner(registry, _sampler(None), config).parallel_optimize(target, workers=workers)
    typer.echo(f"{result.operation} completed in {result.elapsed:.4f} seconds.")
    _print_settings(registry)
    _save(config, registry)
    _mark_run(config)


@app.command()
def tweaks() -> None:
    """List the available tweaks."""
    typer.echo("Available Tweaks:")
    for item in default_catalog().list():
        typer.echo(f"- {item.name}")


@app.command()
def tweak(name: str = typer.Argument(..., help="Tweak name")) -> None:
    """Apply a canned tweak."""
    try:
        applied = default_catalog().apply(name)
    except UnknownTweak as exc:
        typer.echo(f"Tweak not found: {name}", err=True)
        raise typer.Exit(1) from exc
    logger.info("Applied tweak %s", applied.name)
    typer.echo(f"Applying tweak: {applied.name}")
    typer.echo(applied.description)


if __name__ == "__main__":
    app()
