"""Utility functions for meshtype.

This module provides utility functions including:

- Logging setup and configuration
- Per-run statistics and log-once reporting of glyph failures
"""

from meshtype.utils.logging import (
    MeshingLogger,
    MeshingStats,
    configure_logging,
)

__all__ = [
    "MeshingLogger",
    "MeshingStats",
    "configure_logging",
]
