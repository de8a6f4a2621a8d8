"""Root error class for the vx-sysprops error hierarchy."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vx_sysprops.flags import SysProp


class SysPropsError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        key: Lookup key of the property involved, when there is one.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context, kept JSON-serialisable.
    """

    default_code: str = "sysprops_error"

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.key = key
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    @property
    def flag(self) -> SysProp | None:
        """Registry member owning :attr:`key`, ``None`` for unknown or missing keys."""
        if self.key is None:
            return None
        from vx_sysprops.flags import SysProp

        try:
            return SysProp.from_key(self.key)
        except KeyError:
            return None

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, key={self.key!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict; ``key``/``flag`` appear only when a key is set."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.key is not None:
            payload["key"] = self.key
            flag = self.flag
            payload["flag"] = flag.name if flag is not None else None
        payload["detail"] = self.detail
        return payload


__all__ = ["SysPropsError"]
