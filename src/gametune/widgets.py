"""Custom Textual widgets for the gametune menu."""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import DataTable, Input, Static

from gametune.registry import Setting
from gametune.sampler import PerformanceSample


class SettingsTable(DataTable):
    """Current setting values with their bounds."""

    DEFAULT_CSS = """
    SettingsTable {
        height: auto;
        max-height: 12;
        margin: 1 2;
    }
    """

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("cursor_type", "row")
        kwargs.setdefault("zebra_stripes", True)
        super().__init__(**kwargs)

    def show(self, settings: list[Setting]) -> None:
        """Replace the rows with a fresh snapshot."""
        if not self.columns:
            self.add_columns("Setting", "Value", "Range")
        self.clear()
        for setting in settings:
            self.add_row(
                Text(setting.name),
                str(setting.value),
                f"{setting.min_value}-{setting.max_value}",
            )


class PerformancePanel(Static):
    """Last performance sample."""

    DEFAULT_CSS = """
    PerformancePanel {
        margin: 0 2;
        padding: 0 1;
        border: round $surface-lighten-2;
        height: auto;
    }
    """

    sample: PerformanceSample | None = None

    def show(self, sample: PerformanceSample) -> None:
        self.sample = sample
        lines = [
            f"FPS: {sample.fps}",
            f"CPU Usage: {sample.cpu_usage}%",
            f"GPU Usage: {sample.gpu_usage}%",
        ]
        if sample.advanced is not None:
            lines.append(f"GPU Model: {sample.advanced.gpu_model}")
            lines.append(f"Available Memory: {sample.advanced.available_memory_mb} MB")
        self.update("\n".join(lines))


class StatusBar(Static):
    """Bottom bar showing the settings file, last target, and unsaved state."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text-muted;
        padding: 0 2;
    }
    """

    path: reactive[str] = reactive("")
    target: reactive[int | None] = reactive(None)
    dirty: reactive[bool] = reactive(False)

    def render(self) -> str:
        parts = [f"file: {self.path}"]
        if self.target is not None:
            parts.append(f"target: {self.target}")
        if self.dirty:
            parts.append("unsaved changes")
        return " │ ".join(parts)


class PromptInput(Input):
    """Single-line input used to answer the current menu prompt."""

    DEFAULT_CSS = """
    PromptInput {
        dock: bottom;
        border: tall $surface-lighten-2;
    }
    PromptInput:focus {
        border: tall $accent;
    }
    """
