"""Error kinds raised by the deck services."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Readings cannot be normalized (empty, or no positive maximum)."""


class KeyNotFoundError(KeyError):
    """A flip was requested for a relay the state does not define."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Relay {self.key!r} not found."
