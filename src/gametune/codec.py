"""Text codecs for the settings file and the config file.

Both files are flat ``key=value`` lines. Settings files carry integer values
keyed by setting name; only values are persisted, so loading needs a
registry that already holds the matching definitions. Config files carry
arbitrary strings.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from gametune.registry import SettingsRegistry

SETTINGS_HEADER = "Game Settings:"

_INT_RE = re.compile(r"[+-]?[0-9]+")


class LoadReport(BaseModel):
    """Outcome of decoding a settings file."""

    applied: int = 0
    skipped: int = 0
    unknown: int = 0


def split_pair(line: str) -> tuple[str, str] | None:
    """Split a line on its first '='. A missing value is the empty string."""
    line = line.rstrip("\r\n")
    key, sep, value = line.partition("=")
    if not sep:
        return None
    return key, value


def _parse_setting_line(line: str) -> tuple[str, int] | None:
    """Parse ``name=value`` with exactly one '=' and a base-10 integer value."""
    if line.count("=") != 1:
        return None
    pair = split_pair(line)
    if pair is None:
        return None
    name, raw = pair[0].strip(), pair[1].strip()
    if not name or not _INT_RE.fullmatch(raw):
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return name, value


def serialize(registry: SettingsRegistry, header: str | None = SETTINGS_HEADER) -> str:
    """Render the registry as one ``name=value`` line per setting."""
    lines = [header] if header else []
    lines.extend(f"{s.name}={s.value}" for s in registry.list())
    return "".join(line + "\n" for line in lines)


def deserialize(text: str, registry: SettingsRegistry) -> LoadReport:
    """Apply every well-formed line of text to the registry.

    Malformed lines are skipped and counted, never raised. Well-formed lines
    naming no known setting are counted as unknown.
    """
    report = LoadReport()
    for line in text.splitlines():
        if not line.strip() or line.strip() == SETTINGS_HEADER:
            continue
        parsed = _parse_setting_line(line)
        if parsed is None:
            report.skipped += 1
            continue
        name, value = parsed
        if registry.update(name, value) is None:
            report.unknown += 1
        else:
            report.applied += 1
    return report


def serialize_config(values: dict[str, str]) -> str:
    """Render config pairs sorted by key."""
    return "".join(f"{key}={values[key]}\n" for key in sorted(values))


def deserialize_config(text: str) -> dict[str, str]:
    """Parse config pairs. Later duplicates override earlier ones."""
    values: dict[str, str] = {}
    for line in text.splitlines():
        pair = split_pair(line)
        if pair is None:
            continue
        key, value = pair
        values[key] = value
    return values
