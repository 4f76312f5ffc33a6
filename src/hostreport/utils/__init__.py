"""Utility functions for hostreport."""

from hostreport.utils.logging import configure_logging

__all__ = ["configure_logging"]
