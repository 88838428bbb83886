"""Tests for the settings registry."""

from __future__ import annotations

import threading

import pytest

from gametune.errors import InvalidBounds
from gametune.registry import SettingSpec, SettingsRegistry


def assert_in_bounds(reg: SettingsRegistry) -> None:
    for s in reg.list():
        assert s.min_value <= s.value <= s.max_value, s


# --- add ---


def test_add_keeps_insertion_order(registry):
    assert registry.names() == ["Resolution", "Texture Quality", "Shadow Quality"]


def test_add_clamps_out_of_range_default():
    reg = SettingsRegistry()
    reg.add("Texture", 9, 1, 5)
    reg.add("Shadow", -3, 1, 4)
    assert reg.get("Texture").value == 5
    assert reg.get("Shadow").value == 1


def test_add_rejects_inverted_bounds():
    reg = SettingsRegistry()
    with pytest.raises(InvalidBounds) as excinfo:
        reg.add("Broken", 3, 5, 1)
    assert excinfo.value.name == "Broken"
    assert len(reg) == 0


def test_from_specs():
    reg = SettingsRegistry.from_specs([SettingSpec(name="A", default=2, min=0, max=3)])
    assert reg.get("A").value == 2
    assert reg.get("A").bounds == (0, 3)


# --- optimize_all ---


def test_optimize_all_applies_policy(registry):
    registry.optimize_all(70)
    values = {s.name: s.value for s in registry.list()}
    assert values == {"Resolution": 720, "Texture Quality": 5, "Shadow Quality": 4}


def test_optimize_all_is_idempotent(registry):
    registry.optimize_all(35)
    first = registry.list()
    registry.optimize_all(35)
    assert registry.list() == first


# --- update ---


def test_update_clamps(registry):
    updated = registry.update("Texture Quality", 42)
    assert updated is not None
    assert updated.value == 5
    assert registry.get("Texture Quality").value == 5


def test_update_unknown_name_is_noop(registry):
    before = registry.list()
    assert registry.update("DoesNotExist", 99) is None
    assert registry.list() == before


def test_update_hits_first_duplicate():
    reg = SettingsRegistry()
    reg.add("Dup", 1, 0, 10)
    reg.add("Dup", 1, 0, 10)
    reg.update("Dup", 7)
    assert [s.value for s in reg.list()] == [7, 1]


# --- snapshots ---


def test_list_returns_copies(registry):
    snapshot = registry.list()
    snapshot[0].value = 99999
    snapshot.clear()
    assert registry.get("Resolution").value == 1080
    assert len(registry) == 3


def test_contains(registry):
    assert "Resolution" in registry
    assert "Nope" not in registry


# --- invariants ---


def test_bounds_hold_across_mixed_operations(registry):
    for target in (-1000, 0, 35, 70, 100000):
        registry.optimize_all(target)
        assert_in_bounds(registry)
    for value in (-5, 0, 3, 5000):
        registry.update("Resolution", value)
        registry.update("Shadow Quality", value)
        assert_in_bounds(registry)


def test_concurrent_writers_keep_bounds(registry):
    def worker(n: int) -> None:
        for i in range(200):
            if i % 2:
                registry.optimize_all(n * i)
            else:
                registry.update("Texture Quality", n - i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(-4, 4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert_in_bounds(registry)
