"""Property stores – EnvironPropertyStore."""
from __future__ import annotations

import os
from collections.abc import Mapping

from vx_sysprops.store.port import PropertyStore


class EnvironPropertyStore(PropertyStore):
    """Read-through view over the process environment.

    Keys are looked up verbatim, so ``vertx.disableMetrics`` must be exported
    under exactly that name. Pass *environ* to read from another mapping.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str) -> str | None:
        return self._environ.get(key)


__all__ = ["EnvironPropertyStore"]
