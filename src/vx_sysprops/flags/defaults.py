"""Flags – default resolvers.

A resolver receives the store the read went to and returns the value to use
when the flag's own key is absent.
"""
from __future__ import annotations

import os

from vx_sysprops.observability import get_logger
from vx_sysprops.store import TMPDIR_KEY, PropertyStore

CACHE_DIR_BASE = "vertx-cache"

_log = get_logger(__name__)


def no_default(store: PropertyStore) -> str | None:  # noqa: ARG001
    return None


def file_cache_dir_default(store: PropertyStore) -> str:
    """``<tmpdir><sep>vertx-cache``, with ``.`` when no temp directory is set.

    Recomputed on every call so a changed temp directory is picked up.
    """
    tmp_dir = store.get(TMPDIR_KEY)
    if tmp_dir is None:
        tmp_dir = "."
    value = tmp_dir + os.sep + CACHE_DIR_BASE
    _log.debug("sysprops.default_resolved", tmp_dir=tmp_dir, value=value)
    return value


__all__ = ["CACHE_DIR_BASE", "file_cache_dir_default", "no_default"]
