"""Property stores – PropertyStore port."""
from __future__ import annotations

import abc


class PropertyStore(abc.ABC):
    """Port: look up a string property by key."""

    @abc.abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or ``None`` when absent."""


__all__ = ["PropertyStore"]
