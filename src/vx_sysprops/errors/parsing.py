"""Parsing errors raised by typed property accessors."""
from __future__ import annotations

from vx_sysprops.errors.base import SysPropsError


class NumberFormatError(SysPropsError, ValueError):
    """A property holds a string that is not a valid integer of the requested width."""

    default_code = "number_format"

    def __init__(self, key: str, value: str, reason: str) -> None:
        super().__init__(
            f"Property '{key}' has invalid numeric value {value!r}: {reason}",
            key=key,
            detail={"value": value, "reason": reason},
        )
        self.value = value
        self.reason = reason


__all__ = ["NumberFormatError"]
