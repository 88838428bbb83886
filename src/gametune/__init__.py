"""Gametune: bounded game settings, a tuning policy, and a key=value store."""

__version__ = "0.1.0"
