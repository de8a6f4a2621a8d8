"""
vx_sysprops – process-wide registry of runtime system properties.

Import path convention::

    from vx_sysprops.flags import SysProp
    from vx_sysprops.store import InMemoryPropertyStore, set_default_store
    from vx_sysprops.errors import NumberFormatError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
