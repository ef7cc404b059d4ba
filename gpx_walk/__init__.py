# gpx_walk/__init__.py

"""
GPX Walk: tools for GPS Exchange Format track files
===================================================

Ingests folders of GPX files and produces derived outputs.

Key Features:
- Flattened point extraction across every file of a folder
- One GeoJSON LineString FeatureCollection per GPX file, plus a manifest
- PNG path rendering on the Spherical Mercator tile pixel grid, with
  gap detection so GPS dropouts are not bridged by straight lines
- Fail-fast or best-effort per-file error handling

License: MIT
"""

from gpx_walk.__version__ import __version__
from gpx_walk.config import RenderConfig, TransformConfig
from gpx_walk.core import GPX, LatLng, Pixel, Point, Segment, Track
from gpx_walk.pipelines import GeoJSONTransformer, PathVisualizer, PointExtractor
from gpx_walk.utils import ErrorStrategy, decode_gpx, read_gpx_file, read_gpx_folder

__all__ = [
    "__version__",
    "RenderConfig",
    "TransformConfig",
    "GPX",
    "Track",
    "Segment",
    "Point",
    "LatLng",
    "Pixel",
    "ErrorStrategy",
    "decode_gpx",
    "read_gpx_file",
    "read_gpx_folder",
    "PointExtractor",
    "GeoJSONTransformer",
    "PathVisualizer",
]
