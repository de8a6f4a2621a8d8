"""Property stores – InMemoryPropertyStore."""
from __future__ import annotations

import threading
from collections.abc import Mapping

from vx_sysprops.store.port import PropertyStore


class InMemoryPropertyStore(PropertyStore):
    """Mutable :class:`PropertyStore` backed by a plain ``dict``.

    Reads and writes of a single key are atomic; there is no atomicity
    across keys.

    Usage::

        store = InMemoryPropertyStore({"vertx.disableMetrics": "true"})
        store.set("vertx.cacheDirBase", "/var/cache/app")

        assert SysProp.DISABLE_METRICS.get_boolean(store) is True
    """

    def __init__(self, properties: Mapping[str, str] | None = None) -> None:
        self._props: dict[str, str] = {}
        self._lock = threading.Lock()
        for key, value in (properties or {}).items():
            self.set(key, value)

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._props.get(key)

    # ------------------------------------------------------------------
    # Host-side mutators
    # ------------------------------------------------------------------

    def set(self, key: str, value: str) -> "InMemoryPropertyStore":
        if not isinstance(value, str):
            raise TypeError(
                f"Property '{key}' value must be str, got {type(value).__name__}"
            )
        with self._lock:
            self._props[key] = value
        return self

    def clear(self, key: str) -> str | None:
        """Remove *key* and return its previous value."""
        with self._lock:
            return self._props.pop(key, None)

    def reset(self) -> None:
        with self._lock:
            self._props.clear()

    def snapshot(self) -> dict[str, str]:
        """Copy of every property currently stored."""
        with self._lock:
            return dict(self._props)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._props

    def __len__(self) -> int:
        with self._lock:
            return len(self._props)


__all__ = ["InMemoryPropertyStore"]
