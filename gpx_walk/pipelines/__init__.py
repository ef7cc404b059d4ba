"""Processing pipelines for GPX Walk"""

from .extract import ExtractionResult, PointExtractor, extract_points
from .transform import GeoJSONTransformer, TransformSummary, build_feature_collection
from .visualise import (
    NormalizedPath,
    PathVisualizer,
    VisualisationResult,
    normalize_pixels,
    project_points,
    split_strokes,
)

__all__ = [
    "extract_points",
    "PointExtractor",
    "ExtractionResult",
    "build_feature_collection",
    "GeoJSONTransformer",
    "TransformSummary",
    "project_points",
    "normalize_pixels",
    "split_strokes",
    "NormalizedPath",
    "PathVisualizer",
    "VisualisationResult",
]
