"""Flags – the fixed registry of runtime system properties."""
from vx_sysprops.flags.defaults import CACHE_DIR_BASE, file_cache_dir_default, no_default
from vx_sysprops.flags.describe import SysPropInfo, describe
from vx_sysprops.flags.parsing import INT_BITS, LONG_BITS, parse_integer
from vx_sysprops.flags.sysprop import SysProp

__all__ = [
    "CACHE_DIR_BASE",
    "INT_BITS",
    "LONG_BITS",
    "SysProp",
    "SysPropInfo",
    "describe",
    "file_cache_dir_default",
    "no_default",
    "parse_integer",
]
