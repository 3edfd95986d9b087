"""Utility functions for fontfactory.

This module provides logging setup and per-load statistics tracking.
"""

from fontfactory.utils.logging import (
    LoadLogger,
    LoadStats,
    configure_logging,
)

__all__ = [
    "LoadLogger",
    "LoadStats",
    "configure_logging",
]
