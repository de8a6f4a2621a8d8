"""Property stores – the external key-value source behind every flag."""
from vx_sysprops.store.port import PropertyStore
from vx_sysprops.store.in_memory import InMemoryPropertyStore
from vx_sysprops.store.environ import EnvironPropertyStore
from vx_sysprops.store.system import (
    TMPDIR_KEY,
    get_default_store,
    set_default_store,
    system_properties,
)

__all__ = [
    "EnvironPropertyStore",
    "InMemoryPropertyStore",
    "PropertyStore",
    "TMPDIR_KEY",
    "get_default_store",
    "set_default_store",
    "system_properties",
]
