"""Ordered registry of named, bounded integer settings.

Every value stays inside its setting's [min_value, max_value] after each
operation: defaults are clamped on insert, and both the optimization pass
and manual updates clamp before writing. A single lock serializes writers,
so the registry can be shared with worker threads.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from pydantic import BaseModel

from gametune.errors import InvalidBounds
from gametune.policy import clamp, derive


class Setting(BaseModel):
    """Named integer with fixed bounds."""

    name: str
    value: int
    min_value: int
    max_value: int

    @property
    def bounds(self) -> tuple[int, int]:
        return self.min_value, self.max_value


class SettingSpec(BaseModel):
    """Definition used to seed a registry: a name, a default, and bounds."""

    name: str
    default: int
    min: int
    max: int


class SettingsRegistry:
    """Insertion-ordered collection of settings with clamped mutation.

    Duplicate names are accepted. Lookups and updates act on the first
    setting with a given name.
    """

    def __init__(self) -> None:
        self._settings: list[Setting] = []
        self._lock = threading.Lock()

    @classmethod
    def from_specs(cls, specs: Iterable[SettingSpec]) -> SettingsRegistry:
        registry = cls()
        for spec in specs:
            registry.add(spec.name, spec.default, spec.min, spec.max)
        return registry

    def add(self, name: str, default_value: int, min_value: int, max_value: int) -> Setting:
        """Append a setting. The default is clamped into the bounds."""
        if min_value > max_value:
            raise InvalidBounds(name, min_value, max_value)
        setting = Setting(
            name=name,
            value=clamp(default_value, min_value, max_value),
            min_value=min_value,
            max_value=max_value,
        )
        with self._lock:
            self._settings.append(setting)
        return setting.model_copy()

    def optimize_all(self, target_performance: int) -> None:
        """Set every value from the target score via the policy."""
        with self._lock:
            for setting in self._settings:
                setting.value = derive(target_performance, setting.min_value, setting.max_value)

    def update(self, name: str, raw_value: int) -> Setting | None:
        """Clamp raw_value into the named setting. Unknown names are ignored."""
        with self._lock:
            setting = self._find(name)
            if setting is None:
                return None
            setting.value = clamp(raw_value, setting.min_value, setting.max_value)
            return setting.model_copy()

    def get(self, name: str) -> Setting | None:
        with self._lock:
            setting = self._find(name)
            return setting.model_copy() if setting is not None else None

    def list(self) -> list[Setting]:
        """Snapshot of the settings in insertion order."""
        with self._lock:
            return [setting.model_copy() for setting in self._settings]

    def names(self) -> list[str]:
        with self._lock:
            return [setting.name for setting in self._settings]

    def _find(self, name: str) -> Setting | None:
        """First setting called name. Caller holds the lock."""
        for setting in self._settings:
            if setting.name == name:
                return setting
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._settings)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return any(setting.name == name for setting in self._settings)
