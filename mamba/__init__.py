"""Simulation core for the Hungry Mamba game."""

__all__ = [
    "collision",
    "config",
    "constants",
    "errors",
    "grid",
    "main",
    "protocol",
    "rabbit",
    "snake",
    "utils",
    "world",
]
