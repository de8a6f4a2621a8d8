"""Testing helpers – pytest fixtures for a controlled property store.

Enable in a ``conftest.py``::

    pytest_plugins = ["vx_sysprops.testing.fixtures"]
"""
from vx_sysprops.testing.fixtures import property_store

__all__ = ["property_store"]
