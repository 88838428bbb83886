"""Textual TUI menu: wires the tuner, tweaks, and settings file to the display."""

from __future__ import annotations

import contextlib
import io
import re
from typing import ClassVar

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, RichLog

from gametune.codec import split_pair
from gametune.config import Config
from gametune.errors import StorageUnavailable, UnknownTweak
from gametune.logs import get_logger, log_error
from gametune.sampler import PerformanceSampler, SimulatedSampler
from gametune.storage import SettingsFile
from gametune.tuner import Tuner
from gametune.tweaks import TweakCatalog, default_catalog
from gametune.widgets import PerformancePanel, PromptInput, SettingsTable, StatusBar

logger = get_logger("app")

_PROMPTS = {
    "optimize": "Enter target performance score ({lo}-{hi})",
    "update": "Enter setting=value",
    "tweak": "Enter the name of the tweak to apply",
}


class GametuneApp(App):
    """Gametune: interactive gaming optimizer menu."""

    TITLE = "Gametune"
    SUB_TITLE = "gaming optimizer"

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("v", "view", "View"),
        Binding("o", "prompt('optimize')", "Optimize"),
        Binding("u", "prompt('update')", "Set"),
        Binding("t", "prompt('tweak')", "Tweak"),
        Binding("p", "analyze", "Performance"),
        Binding("r", "realtime", "Real-time"),
        Binding("s", "save", "Save"),
        Binding("l", "load", "Load"),
        Binding("escape", "cancel_prompt", "Cancel", show=False),
        Binding("q", "quit", "Exit"),
    ]

    CSS = """
    #main {
        height: 1fr;
    }
    #activity {
        height: 1fr;
        margin: 0 2;
        border-top: solid $surface-lighten-2;
    }
    #prompt.-hidden {
        display: none;
    }
    """

    def __init__(
        self,
        config: Config | None = None,
        sampler: PerformanceSampler | None = None,
        tweaks: TweakCatalog | None = None,
        debug: bool = False,
    ) -> None:
        super().__init__()
        self.config = config or Config()
        self.registry = self.config.build_registry()
        self.store = SettingsFile(self.config.settings_path)
        self.tweaks = tweaks or default_catalog()
        self._show_debug = debug
        self._debug_file: io.TextIOWrapper | None = None
        self.tuner = Tuner(
            self.registry,
            sampler or SimulatedSampler(advanced=True),
            self.config,
            on_debug=self._log_debug if debug else None,
        )
        self._pending: str | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="main"):
            yield SettingsTable(id="settings")
            yield PerformancePanel("No performance analysis yet.", id="performance")
            yield RichLog(id="activity", markup=True, max_lines=500)
        yield StatusBar(id="status")
        prompt = PromptInput(id="prompt")
        prompt.add_class("-hidden")
        yield prompt
        yield Footer()

    _RICH_TAG_RE = re.compile(r"\[/?[a-z][a-z0-9_ ]*\]", re.IGNORECASE)

    def _log_debug(self, msg: str) -> None:
        """Write to the activity log and the debug trace file."""
        if not self._show_debug:
            return
        with contextlib.suppress(Exception):
            self.query_one("#activity", RichLog).write(msg)
        if self._debug_file:
            plain = self._RICH_TAG_RE.sub("", msg)
            self._debug_file.write(plain + "\n")
            self._debug_file.flush()

    def _say(self, msg: str) -> None:
        self.query_one("#activity", RichLog).write(msg)

    def _refresh(self) -> None:
        self.query_one("#settings", SettingsTable).show(self.registry.list())

    def on_mount(self) -> None:
        status = self.query_one("#status", StatusBar)
        status.path = self.config.settings_path

        if self._show_debug:
            self._debug_file = open("gametune_debug.log", "w", encoding="utf-8")  # noqa: SIM115
            self._log_debug("[bold]Gametune debug trace[/bold]")

        self.action_load()
        status.dirty = False
        self.query_one("#settings", SettingsTable).focus()

    def on_unmount(self) -> None:
        if self._debug_file:
            self._debug_file.close()

    def action_view(self) -> None:
        self._refresh()
        self._say("[b]Current Settings:[/b]")
        for setting in self.registry.list():
            self._say(f"- {escape(setting.name)}: {setting.value}")

    def action_prompt(self, kind: str) -> None:
        """Show the input line for a prompt kind (optimize, update, tweak)."""
        if kind == "tweak":
            self._say("[b]Available Tweaks:[/b]")
            for tweak in self.tweaks.list():
                self._say(f"- {escape(tweak.name)}")
        self._pending = kind
        prompt = self.query_one("#prompt", PromptInput)
        prompt.placeholder = _PROMPTS[kind].format(
            lo=self.config.min_target, hi=self.config.max_target
        )
        prompt.remove_class("-hidden")
        prompt.focus()

    def action_cancel_prompt(self) -> None:
        self._close_prompt()

    def _close_prompt(self) -> None:
        self._pending = None
        prompt = self.query_one("#prompt", PromptInput)
        prompt.clear()
        prompt.add_class("-hidden")
        self.query_one("#settings", SettingsTable).focus()

    def on_input_submitted(self, event: PromptInput.Submitted) -> None:
        """Dispatch the answer to the pending prompt."""
        text = event.value.strip()
        kind = self._pending
        self._close_prompt()
        if not text or kind is None:
            return
        match kind:
            case "optimize":
                self._submit_optimize(text)
            case "update":
                self._submit_update(text)
            case "tweak":
                self._submit_tweak(text)

    def _submit_optimize(self, text: str) -> None:
        try:
            target = int(text)
        except ValueError:
            self._say("[red]Invalid input. Please try again.[/red]")
            return
        if not self.config.target_in_range(target):
            self._say(
                f"[red]Target must be between {self.config.min_target} "
                f"and {self.config.max_target}.[/red]"
            )
            return
        for setting in self.tuner.optimize(target):
            self._say(f"Optimized {escape(setting.name)} to {setting.value}")
        self.query_one("#status", StatusBar).target = target
        self._changed()

    def _submit_update(self, text: str) -> None:
        pair = split_pair(text)
        if pair is None or not pair[0].strip():
            self._say("[red]Expected setting=value.[/red]")
            return
        name = pair[0].strip()
        try:
            value = int(pair[1])
        except ValueError:
            self._say("[red]Invalid input. Please try again.[/red]")
            return
        setting = self.tuner.update(name, value)
        if setting is None:
            self._say(f"[yellow]No setting named {escape(repr(name))}.[/yellow]")
            return
        self._say(f"Updated {escape(setting.name)} to {setting.value}")
        self._changed()

    def _submit_tweak(self, text: str) -> None:
        try:
            tweak = self.tweaks.apply(text)
        except UnknownTweak:
            logger.info("Tweak not found: %s", text)
            self._say(f"[yellow]Tweak not found: {escape(text)}[/yellow]")
            return
        logger.info("Applied tweak %s", tweak.name)
        self._say(f"Applying tweak: {escape(tweak.name)}")
        self._say(escape(tweak.description))

    def action_analyze(self) -> None:
        sample = self.tuner.analyze()
        self.query_one("#performance", PerformancePanel).show(sample)
        self._say(f"Performance Analysis: {sample.fps} FPS")

    def action_realtime(self) -> None:
        """Run one real-time tuning step."""
        result = self.tuner.realtime_cycle()
        self.query_one("#performance", PerformancePanel).show(result.sample)
        fps = result.sample.fps
        if result.adjusted:
            self._say(f"FPS {fps} outside the stable band. Optimized for target {result.target}.")
            self.query_one("#status", StatusBar).target = result.target
            self._changed()
        else:
            self._say(f"Stable FPS detected ({fps}). No adjustments needed.")

    def action_save(self) -> None:
        try:
            self.store.save(self.registry)
        except StorageUnavailable as exc:
            log_error(logger, str(exc))
            self._say(f"[red]Failed to save settings: {escape(str(exc))}[/red]")
            return
        logger.info("Settings saved to %s", self.store.path)
        self._say(f"Settings saved to {escape(str(self.store.path))}")
        self.query_one("#status", StatusBar).dirty = False

    def action_load(self) -> None:
        try:
            report = self.store.load(self.registry)
        except StorageUnavailable as exc:
            logger.info("Keeping defaults: %s", exc)
            self._say(f"[yellow]Keeping current settings: {escape(str(exc))}[/yellow]")
            self._refresh()
            return
        logger.info("Settings loaded from %s", self.store.path)
        self._say(f"Settings loaded from {escape(str(self.store.path))}")
        if report.skipped:
            self._say(f"[yellow]Skipped {report.skipped} malformed line(s).[/yellow]")
        self._refresh()
        self.query_one("#status", StatusBar).dirty = False

    def _changed(self) -> None:
        self._refresh()
        self.query_one("#status", StatusBar).dirty = True
