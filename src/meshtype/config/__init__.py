"""Configuration management for meshtype.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- OutlineConfig: Font size and curve flattening settings
- ExtrusionConfig: Placement and depth settings
- ExportConfig: Output format settings
- LoggingConfig: Logging settings
- MeshTypeSettings: Main application settings
"""

from meshtype.config.settings import (
    ExportConfig,
    ExtrusionConfig,
    LoggingConfig,
    MeshFormat,
    MeshTypeSettings,
    OutlineConfig,
    get_default_settings,
)

__all__ = [
    "ExportConfig",
    "ExtrusionConfig",
    "LoggingConfig",
    "MeshFormat",
    "MeshTypeSettings",
    "OutlineConfig",
    "get_default_settings",
]
