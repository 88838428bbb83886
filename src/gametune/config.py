"""Runtime configuration, default setting definitions, and thresholds."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from gametune.registry import SettingSpec, SettingsRegistry

DEFAULT_SETTINGS_PATH = "settings.txt"
DEFAULT_CONFIG_PATH = "config.txt"
DEFAULT_LOG_PATH = "optimizer.log"

DEFAULT_SETTINGS: list[dict[str, int | str]] = [
    {"name": "Resolution", "default": 1080, "min": 720, "max": 2160},
    {"name": "Texture Quality", "default": 3, "min": 1, "max": 5},
    {"name": "Shadow Quality", "default": 2, "min": 1, "max": 4},
]


class Config(BaseModel):
    """Runtime configuration for gametune."""

    settings_path: str = DEFAULT_SETTINGS_PATH
    config_path: str = DEFAULT_CONFIG_PATH
    log_path: str = DEFAULT_LOG_PATH
    workers: int = Field(default=4, ge=1)
    min_target: int = 30
    max_target: int = 100
    startup_fps: int = 55
    startup_high: int = 60
    startup_low: int = 50
    low_fps: int = 50
    high_fps: int = 60
    low_target: int = 40
    high_target: int = 70
    settings: list[SettingSpec] = Field(
        default_factory=lambda: [SettingSpec(**spec) for spec in DEFAULT_SETTINGS]
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> Config:
        if self.min_target > self.max_target:
            raise ValueError("min_target must not exceed max_target")
        if self.low_fps > self.high_fps:
            raise ValueError("low_fps must not exceed high_fps")
        return self

    def build_registry(self) -> SettingsRegistry:
        return SettingsRegistry.from_specs(self.settings)

    def target_in_range(self, target: int) -> bool:
        return self.min_target <= target <= self.max_target
