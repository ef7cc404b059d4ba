# gpx_walk/pipelines/visualise.py

"""
Path visualisation.

Points of every GPX file in a folder are concatenated in ingestion order,
projected onto the Mercator pixel grid, normalised to a tight bounding box
with row 0 at the top, and stroked as polylines. Consecutive points further
apart than the gap threshold are not connected, so GPS dropouts and jumps
between files do not produce long straight lines.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..config import RenderConfig
from ..core import Pixel, Point
from ..geo import lat_lon_to_pixels, origin_pixels
from ..utils.config_validator import ConfigValidator
from ..utils.ingestion import ErrorStrategy, read_gpx_folder
from ..utils.visualization import render_strokes, save_png
from .extract import extract_points


@dataclass
class NormalizedPath:
    """Pixels shifted into a tight, non-negative bounding box with Y inverted"""

    pixels: List[Pixel] = field(default_factory=list)
    width: int = 0
    height: int = 0


@dataclass
class VisualisationResult:
    """Outcome of a visualisation run"""

    point_count: int = 0
    stroke_count: int = 0
    width: int = 0
    height: int = 0
    output_path: Optional[Path] = None


def project_points(points: Sequence[Point], zoom: int) -> List[Pixel]:
    """
    Project points to pixels relative to the lat=0, lon=0 origin

    Args:
        points: Points to project
        zoom: Zoom level

    Returns:
        Pixels in the same order as the points
    """
    origin_x, origin_y = origin_pixels(zoom)
    pixels = []
    for point in points:
        x, y = lat_lon_to_pixels(point.latitude, point.longitude, zoom)
        pixels.append(Pixel(x - origin_x, y - origin_y))
    return pixels


def normalize_pixels(pixels: Sequence[Pixel]) -> NormalizedPath:
    """
    Shift pixels so the minimum X and Y become 0, then invert the Y axis

    The canvas size is the truncated maximum X and Y after shifting.
    """
    if not pixels:
        return NormalizedPath()

    min_x = min(p.x for p in pixels)
    min_y = min(p.y for p in pixels)
    shifted = [p.shifted(-min_x, -min_y) for p in pixels]

    max_x = max(p.x for p in shifted)
    max_y = max(p.y for p in shifted)

    # Raster row 0 is the top, projected Y grows northwards
    inverted = [Pixel(p.x, max_y - p.y) for p in shifted]

    return NormalizedPath(pixels=inverted, width=int(max_x), height=int(max_y))


def split_strokes(pixels: Sequence[Pixel], gap_threshold: float) -> List[List[Pixel]]:
    """
    Split a pixel sequence into strokes at gaps

    A new stroke starts whenever the distance between consecutive pixels is
    strictly greater than ``gap_threshold``.

    Args:
        pixels: Ordered pixels
        gap_threshold: Maximum distance, in pixels, bridged by a line

    Returns:
        Strokes in order; a stroke may hold a single pixel
    """
    strokes: List[List[Pixel]] = []
    current: List[Pixel] = []

    for pixel in pixels:
        if current and current[-1].distance(pixel) > gap_threshold:
            strokes.append(current)
            current = []
        current.append(pixel)

    if current:
        strokes.append(current)

    return strokes


class PathVisualizer:
    """Render all GPX tracks of a folder into a single PNG image"""

    def __init__(self,
                 folder: Union[str, Path],
                 config: Optional[RenderConfig] = None,
                 output_dir: Union[str, Path] = "."):
        """
        Initialize visualizer

        Args:
            folder: Directory containing GPX files
            config: Render configuration
            output_dir: Directory receiving the image
        """
        self.folder = Path(folder)
        self.config = config or RenderConfig()
        self.output_path = Path(output_dir) / self.config.output_filename
        self.logger = logging.getLogger(f"{__name__}.PathVisualizer")

        ConfigValidator.ensure_valid(ConfigValidator.validate_render_config(self.config))

    def run(self) -> VisualisationResult:
        """
        Read the folder fail-fast, render and save the image

        Returns:
            VisualisationResult; ``output_path`` is None when there was
            nothing to draw
        """
        contents = read_gpx_folder(self.folder, ErrorStrategy.FAIL_FAST)
        points = extract_points(contents.gpx_documents)

        path = normalize_pixels(project_points(points, self.config.zoom))
        strokes = split_strokes(path.pixels, self.config.gap_threshold_px)

        self.logger.info(
            f"Projected {len(points)} points at zoom {self.config.zoom} "
            f"into a {path.width}x{path.height} canvas with {len(strokes)} stroke(s)"
        )

        result = VisualisationResult(
            point_count=len(points),
            stroke_count=len(strokes),
            width=path.width,
            height=path.height,
        )

        if path.width == 0 or path.height == 0:
            if points:
                extent_x = max(p.x for p in path.pixels)
                extent_y = max(p.y for p in path.pixels)
                self.logger.warning(
                    f"{len(points)} points span only {extent_x:.2f}x{extent_y:.2f} pixels "
                    f"at zoom {self.config.zoom}; the {path.width}x{path.height} canvas is empty "
                    f"and no image was written (try a higher zoom)"
                )
            else:
                self.logger.warning("No points to render, no image written")
            return result

        canvas = render_strokes(strokes, path.width, path.height, self.config.line_width)
        save_png(canvas, self.output_path)
        result.output_path = self.output_path
        return result
