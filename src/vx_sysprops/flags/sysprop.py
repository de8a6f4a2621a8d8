"""Flags – SysProp enumeration.

Most of these properties are internal knobs kept for benchmarking and
troubleshooting; only a few are documented for end users.
"""
from __future__ import annotations

import enum
from typing import Callable

from vx_sysprops.flags.defaults import file_cache_dir_default, no_default
from vx_sysprops.flags.parsing import INT_BITS, LONG_BITS, parse_integer
from vx_sysprops.store import PropertyStore, get_default_store

DefaultResolver = Callable[[PropertyStore], str | None]


@enum.unique
class SysProp(enum.Enum):
    """A named system property bound to a unique lookup key.

    Every accessor reads the store afresh; nothing is cached. Accessors take
    an optional *store* and otherwise use :func:`get_default_store` at call
    time.
    """

    DISABLE_HTTP_HEADERS_VALIDATION = (
        "vertx.disableHttpHeadersValidation",
        "Skip validation of HTTP header names and values.",
    )
    DISABLE_WEBSOCKETS = (
        "vertx.disableWebsockets",
        "Disable websockets, for benchmarking.",
    )
    DISABLE_METRICS = (
        "vertx.disableMetrics",
        "Disable metrics, for benchmarking.",
    )
    DISABLE_CONTEXT_TIMINGS = (
        "vertx.disableContextTimings",
        "Disable context task execution timings, for benchmarking.",
    )
    DISABLE_DNS_RESOLVER = (
        "vertx.disableDnsResolver",
        "Use the platform DNS resolver instead of the asynchronous one.",
    )
    DISABLE_FILE_CACHING = (
        "vertx.disableFileCaching",
        "Default for whether file caching is disabled.",
    )
    DISABLE_FILE_CP_RESOLVING = (
        "vertx.disableFileCPResolving",
        "Default for whether class-path file resolving is disabled.",
    )
    FILE_CACHE_DIR = (
        "vertx.cacheDirBase",
        "Base directory of the file cache.",
        file_cache_dir_default,
    )
    CACHE_IMMUTABLE_HTTP_RESPONSE_HEADERS = (
        "vertx.cacheImmutableHttpResponseHeaders",
        "Cache encoded bytes of immutable HTTP/1.x response headers.",
        no_default,
        True,
    )
    INTERN_COMMON_HTTP_REQUEST_HEADERS_TO_LOWER_CASE = (
        "vertx.internCommonHttpRequestHeadersToLowerCase",
        "Intern common HTTP/1.x request header names to their lower case form.",
        no_default,
        True,
    )
    LOGGER_DELEGATE_FACTORY_CLASS_NAME = (
        "vertx.logger-delegate-factory-class-name",
        "Fully qualified name of the logger delegate factory.",
    )
    JACKSON_DEFAULT_READ_MAX_NESTING_DEPTH = (
        "vertx.jackson.defaultReadMaxNestingDepth",
        "Maximum JSON nesting depth accepted when reading.",
    )
    JACKSON_DEFAULT_READ_MAX_DOC_LEN = (
        "vertx.jackson.defaultReadMaxDocumentLength",
        "Maximum JSON document length accepted when reading.",
    )
    JACKSON_DEFAULT_READ_MAX_NUM_LEN = (
        "vertx.jackson.defaultReadMaxNumberLength",
        "Maximum JSON number length accepted when reading.",
    )
    JACKSON_DEFAULT_READ_MAX_STRING_LEN = (
        "vertx.jackson.defaultReadMaxStringLength",
        "Maximum JSON string length accepted when reading.",
    )
    JACKSON_DEFAULT_READ_MAX_NAME_LEN = (
        "vertx.jackson.defaultReadMaxNameLength",
        "Maximum JSON property name length accepted when reading.",
    )
    JACKSON_DEFAULT_READ_MAX_TOKEN_COUNT = (
        "vertx.jackson.defaultMaxTokenCount",
        "Maximum number of JSON tokens accepted when reading.",
    )

    def __new__(
        cls,
        key: str,
        description: str = "",
        resolve_default: DefaultResolver = no_default,
        unstable: bool = False,
    ) -> "SysProp":
        member = object.__new__(cls)
        member._value_ = key
        member.key = key
        member.description = description
        member.unstable = unstable
        member._resolve_default = resolve_default
        return member

    @classmethod
    def from_key(cls, key: str) -> "SysProp":
        """Return the member whose lookup key is *key*."""
        try:
            return cls(key)
        except ValueError:
            raise KeyError(key) from None

    def resolve_default(self, store: PropertyStore | None = None) -> str | None:
        """Value used when the key is absent from *store*."""
        return self._resolve_default(_resolve(store))

    def get(self, store: PropertyStore | None = None) -> str | None:
        """Raw string value, falling back to the flag's default."""
        store = _resolve(store)
        value = store.get(self.key)
        if value is None:
            value = self._resolve_default(store)
        return value

    def get_as_long(self, store: PropertyStore | None = None) -> int | None:
        """Value as a signed 64-bit integer, ``None`` when unset.

        Raises :class:`~vx_sysprops.errors.NumberFormatError` on a malformed
        or out-of-range value.
        """
        value = self.get(store)
        if value is None:
            return None
        return parse_integer(self.key, value, LONG_BITS)

    def get_as_int(self, store: PropertyStore | None = None) -> int | None:
        """Value as a signed 32-bit integer, ``None`` when unset."""
        value = self.get(store)
        if value is None:
            return None
        return parse_integer(self.key, value, INT_BITS)

    def get_boolean(self, store: PropertyStore | None = None) -> bool:
        """``True`` iff the key holds ``"true"`` in any letter case.

        Reads the key directly; the flag's default resolver is not consulted.
        """
        value = _resolve(store).get(self.key)
        return value is not None and value.lower() == "true"


def _resolve(store: PropertyStore | None) -> PropertyStore:
    return get_default_store() if store is None else store


__all__ = ["DefaultResolver", "SysProp"]
