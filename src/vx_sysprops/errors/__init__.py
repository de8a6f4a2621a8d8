"""Error hierarchy – public re-export surface.

Hierarchy::

    SysPropsError
    └── NumberFormatError   (also a ValueError)
"""

from vx_sysprops.errors.base import SysPropsError
from vx_sysprops.errors.parsing import NumberFormatError

__all__ = ["NumberFormatError", "SysPropsError"]
