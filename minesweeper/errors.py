from __future__ import annotations


class MinesweeperError(Exception):
    pass


class ConfigurationError(MinesweeperError, ValueError):
    """Board dimensions or mine count cannot produce a playable board."""


class InvariantError(MinesweeperError, RuntimeError):
    """Board state that the generator should never have produced."""
