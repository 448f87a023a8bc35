"""Exception types raised by the simulation core."""

from __future__ import annotations


class MambaError(Exception):
    """Base class for all game errors."""


class ConfigError(MambaError, ValueError):
    """Raised when the configuration document is missing or malformed."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key = key
        prefix = f"{key}: " if key is not None else ""
        super().__init__(prefix + str(message))


class BoardFullError(MambaError, RuntimeError):
    """Raised when no free cell could be found for a new rabbit."""
