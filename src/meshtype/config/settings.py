"""Configuration settings for meshtype."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class MeshFormat(str, Enum):
    """Mesh file formats supported for export."""

    STL = "stl"
    OBJ = "obj"
    PLY = "ply"
    OFF = "off"
    GLB = "glb"


class OutlineConfig(BaseModel):
    """Configuration for glyph outline extraction."""

    font_height: int = Field(
        default=48,
        ge=1,
        le=4096,
        description="Nominal font size in points (rendered at 96 dpi)",
    )
    bezier_steps: int = Field(
        default=4,
        ge=1,
        le=64,
        description="Straight segments used to approximate each curve segment",
    )


class ExtrusionConfig(BaseModel):
    """Configuration for text placement and extrusion."""

    depth: float = Field(
        default=10.0,
        gt=0.0,
        description="Extrusion depth along +z in output units",
    )
    origin_x: float = Field(
        default=0.0,
        description="Pen x position of the first character",
    )
    origin_y: float = Field(
        default=0.0,
        description="Baseline y position",
    )


class ExportConfig(BaseModel):
    """Configuration for mesh export."""

    file_type: MeshFormat = Field(
        default=MeshFormat.STL,
        description="Output mesh format",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class MeshTypeSettings(BaseModel):
    """Main application settings."""

    outline: OutlineConfig = Field(default_factory=OutlineConfig)
    extrusion: ExtrusionConfig = Field(default_factory=ExtrusionConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> MeshTypeSettings:
    """Get default application settings."""
    return MeshTypeSettings()
