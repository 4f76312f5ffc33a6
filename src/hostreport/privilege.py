"""Privilege guard: the report must be produced from an elevated session."""

from __future__ import annotations

import ctypes
import logging
import os

logger = logging.getLogger(__name__)


def is_elevated() -> bool:
    """Return True when running as Administrator (or root outside Windows)."""
    if os.name == "nt":
        try:
            return ctypes.windll.shell32.IsUserAnAdmin() != 0
        except (AttributeError, OSError) as e:
            logger.debug("IsUserAnAdmin unavailable: %s", e)
            return False
    return hasattr(os, "geteuid") and os.geteuid() == 0
