"""Exception types raised by gametune."""

from __future__ import annotations


class GametuneError(Exception):
    """Base class for all gametune errors."""


class InvalidBounds(GametuneError):
    """A setting definition has min_value > max_value."""

    def __init__(self, name: str, min_value: int, max_value: int) -> None:
        super().__init__(f"invalid bounds for {name!r}: min {min_value} > max {max_value}")
        self.name = name
        self.min_value = min_value
        self.max_value = max_value


class StorageUnavailable(GametuneError):
    """A settings or config file could not be opened for reading or writing."""

    def __init__(self, path: str, direction: str, reason: str = "") -> None:
        message = f"cannot open {path} for {direction}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.direction = direction


class UnknownTweak(GametuneError):
    """No tweak is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"tweak not found: {name}")
        self.name = name
