"""Tests for the tweak catalog."""

import pytest

from gametune.errors import UnknownTweak
from gametune.tweaks import TweakCatalog, default_catalog


def test_default_catalog_sorted():
    names = [t.name for t in default_catalog().list()]
    assert names == ["Boost FPS", "Enhance Graphics", "Reduce Input Lag"]


def test_apply_returns_description():
    tweak = default_catalog().apply("Reduce Input Lag")
    assert "V-Sync" in tweak.description


def test_apply_unknown():
    with pytest.raises(UnknownTweak):
        default_catalog().apply("Overclock Everything")


def test_add_replaces_existing():
    catalog = TweakCatalog()
    catalog.add("Boost FPS", "old")
    catalog.add("Boost FPS", "new")
    assert catalog.apply("Boost FPS").description == "new"
    assert len(catalog.list()) == 1
    assert "Boost FPS" in catalog
