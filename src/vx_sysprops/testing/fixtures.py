"""Testing fixtures – property_store."""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from vx_sysprops.store import InMemoryPropertyStore, set_default_store


@pytest.fixture
def property_store() -> Iterator[InMemoryPropertyStore]:
    """Pytest fixture: an empty store installed as the default for one test.

    The previous default store is restored on teardown.
    """
    store = InMemoryPropertyStore()
    previous = set_default_store(store)
    try:
        yield store
    finally:
        set_default_store(previous)


__all__ = ["property_store"]
