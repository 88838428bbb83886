"""File-backed stores for settings values and string config pairs."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from gametune.codec import (
    LoadReport,
    deserialize,
    deserialize_config,
    serialize,
    serialize_config,
)
from gametune.errors import StorageUnavailable
from gametune.registry import SettingsRegistry


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageUnavailable(str(path), "read", str(exc)) from exc


def _write_text(path: Path, text: str) -> None:
    """Write via a sibling temp file and an atomic replace.

    On failure the previous file is left as it was.
    """
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise StorageUnavailable(str(path), "write", str(exc)) from exc


class SettingsFile:
    """Persists registry values as ``name=value`` lines."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self, registry: SettingsRegistry) -> LoadReport:
        return deserialize(_read_text(self.path), registry)

    def save(self, registry: SettingsRegistry) -> None:
        _write_text(self.path, serialize(registry))


class ConfigFile:
    """String key/value pairs persisted next to the settings file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._values: dict[str, str] = {}

    def load(self) -> dict[str, str]:
        """Merge pairs from disk into memory and return them."""
        self._values.update(deserialize_config(_read_text(self.path)))
        return dict(self._values)

    def save(self) -> None:
        _write_text(self.path, serialize_config(self._values))

    def get(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def items(self) -> list[tuple[str, str]]:
        return sorted(self._values.items())
