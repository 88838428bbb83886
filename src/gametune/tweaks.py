"""Named canned tweaks.

A tweak only describes what it would change; applying one never touches the
system.
"""

from __future__ import annotations

from pydantic import BaseModel

from gametune.errors import UnknownTweak

DEFAULT_TWEAKS = {
    "Boost FPS": "Reducing shadow quality and texture resolution for higher FPS.",
    "Enhance Graphics": "Increasing shadow quality and texture resolution for better visuals.",
    "Reduce Input Lag": "Disabling V-Sync to reduce input lag.",
}


class Tweak(BaseModel):
    name: str
    description: str


class TweakCatalog:
    """Tweaks keyed by name. Re-adding a name replaces it."""

    def __init__(self) -> None:
        self._tweaks: dict[str, Tweak] = {}

    def add(self, name: str, description: str) -> Tweak:
        tweak = Tweak(name=name, description=description)
        self._tweaks[name] = tweak
        return tweak

    def apply(self, name: str) -> Tweak:
        """Look up a tweak to apply. Raises UnknownTweak when missing."""
        try:
            return self._tweaks[name]
        except KeyError:
            raise UnknownTweak(name) from None

    def list(self) -> list[Tweak]:
        return [self._tweaks[name] for name in sorted(self._tweaks)]

    def __contains__(self, name: object) -> bool:
        return name in self._tweaks


def default_catalog() -> TweakCatalog:
    catalog = TweakCatalog()
    for name, description in DEFAULT_TWEAKS.items():
        catalog.add(name, description)
    return catalog
