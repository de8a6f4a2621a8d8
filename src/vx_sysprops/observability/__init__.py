"""Observability – structlog logger helpers."""
from vx_sysprops.observability.factory import configure_logging
from vx_sysprops.observability.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
