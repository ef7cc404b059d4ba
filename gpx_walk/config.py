# gpx_walk/config.py

"""Configuration for the GPX Walk pipelines"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError


@dataclass
class RenderConfig:
    """Configuration for path visualisation"""

    # === PROJECTION ===
    zoom: int = 16  # Tile zoom level used for the pixel grid

    # === STROKING ===
    gap_threshold_px: float = 20.0  # Consecutive points further apart start a new stroke
    line_width: int = 5  # Stroke width in pixels

    # === OUTPUT ===
    output_filename: str = "output.png"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RenderConfig":
        """Create from dictionary, ignoring unknown keys"""
        return cls(**_known_fields(cls, data))


@dataclass
class TransformConfig:
    """Configuration for GPX to GeoJSON transformation"""

    manifest_filename: str = "manifest.json"
    indent: int = 2  # JSON indentation for GeoJSON and manifest output

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "TransformConfig":
        """Create from dictionary, ignoring unknown keys"""
        return cls(**_known_fields(cls, data))


def _known_fields(config_class: type, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    if data is not None and not isinstance(data, dict):
        raise ConfigurationError(
            f"{config_class.__name__} section must be a mapping, got {type(data).__name__}"
        )

    valid_fields = {f.name for f in fields(config_class)}
    return {k: v for k, v in (data or {}).items() if k in valid_fields}
