"""Flags – describe(), a point-in-time view of every property."""
from __future__ import annotations

import dataclasses

from vx_sysprops.flags.sysprop import SysProp
from vx_sysprops.observability import get_logger
from vx_sysprops.store import PropertyStore, get_default_store

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class SysPropInfo:
    """One row of :func:`describe`."""
    name: str
    key: str
    description: str
    unstable: bool
    value: str | None


def describe(store: PropertyStore | None = None) -> list[SysPropInfo]:
    """Return every :class:`SysProp` with its current raw value, in declaration order.

    Values are not parsed, so a malformed numeric override shows up here
    as-is rather than raising.
    """
    if store is None:
        store = get_default_store()
    infos = [
        SysPropInfo(
            name=prop.name,
            key=prop.key,
            description=prop.description,
            unstable=prop.unstable,
            value=prop.get(store),
        )
        for prop in SysProp
    ]
    _log.debug(
        "sysprops.described",
        total=len(infos),
        with_value=sum(1 for info in infos if info.value is not None),
    )
    return infos


__all__ = ["SysPropInfo", "describe"]
