"""Shared fixtures."""

from __future__ import annotations

import pytest

from gametune.config import Config
from gametune.registry import SettingsRegistry


@pytest.fixture
def registry():
    """Registry seeded with the three default game settings."""
    return Config().build_registry()


@pytest.fixture
def config(tmp_path):
    return Config(
        settings_path=str(tmp_path / "settings.txt"),
        config_path=str(tmp_path / "config.txt"),
        log_path=str(tmp_path / "optimizer.log"),
    )


@pytest.fixture
def shadow_registry():
    reg = SettingsRegistry()
    reg.add("Shadow", 2, 1, 4)
    return reg
