"""Benchmark: accessor cost of a read-through SysProp lookup.

Sub-benchmarks:
- ``dict.get``                      – raw mapping baseline
- ``SysProp.get_boolean()``         – locked store read plus comparison
- ``SysProp.get_as_int()``          – read plus strict parse
- ``SysProp.FILE_CACHE_DIR.get()``  – absent key, computed default
"""

from __future__ import annotations

from vx_sysprops.flags import SysProp
from vx_sysprops.store import TMPDIR_KEY, InMemoryPropertyStore


def test_dict_get_baseline(benchmark):
    """Plain ``dict.get`` on the same key."""
    props = {"vertx.disableMetrics": "true"}
    result = benchmark(props.get, "vertx.disableMetrics")
    assert result == "true"


def test_get_boolean(benchmark):
    store = InMemoryPropertyStore({"vertx.disableMetrics": "true"})
    result = benchmark(SysProp.DISABLE_METRICS.get_boolean, store)
    assert result is True


def test_get_as_int(benchmark):
    store = InMemoryPropertyStore({"vertx.jackson.defaultMaxTokenCount": "1000000"})
    result = benchmark(SysProp.JACKSON_DEFAULT_READ_MAX_TOKEN_COUNT.get_as_int, store)
    assert result == 1_000_000


def test_file_cache_dir_default(benchmark):
    """Absent key: the default is recomputed on every call."""
    store = InMemoryPropertyStore({TMPDIR_KEY: "/tmp"})
    result = benchmark(SysProp.FILE_CACHE_DIR.get, store)
    assert result.endswith("vertx-cache")
