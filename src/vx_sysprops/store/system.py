"""Property stores – process-wide default store.

``system_properties`` plays the part of the host runtime's property table.
It is seeded with the temp-directory key, which a host runtime always
defines; everything else is unset until host code sets it.
"""
from __future__ import annotations

import tempfile

from vx_sysprops.store.in_memory import InMemoryPropertyStore
from vx_sysprops.store.port import PropertyStore

TMPDIR_KEY = "java.io.tmpdir"

system_properties = InMemoryPropertyStore({TMPDIR_KEY: tempfile.gettempdir()})

_default_store: PropertyStore = system_properties


def get_default_store() -> PropertyStore:
    """Return the store used by accessors called without an explicit store."""
    return _default_store


def set_default_store(store: PropertyStore) -> PropertyStore:
    """Install *store* as the default and return the one it replaces."""
    global _default_store
    if not isinstance(store, PropertyStore):
        raise TypeError(f"Expected a PropertyStore, got {type(store).__name__}")
    previous, _default_store = _default_store, store
    return previous


__all__ = ["TMPDIR_KEY", "get_default_store", "set_default_store", "system_properties"]
