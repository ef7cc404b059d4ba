"""Raster rendering of projected paths"""

import logging
from pathlib import Path
from typing import Sequence, Union

import cv2
import numpy as np

from ..core import Pixel
from ..exceptions import RenderError

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (255, 255, 255)  # White (BGR)
STROKE_COLOR = (0, 0, 0)  # Black (BGR)

# Fractional bits passed to cv2 so strokes keep sub-pixel positions
SUBPIXEL_BITS = 4


def create_canvas(width: int, height: int) -> np.ndarray:
    """Create a blank white BGR canvas"""
    canvas = np.empty((max(height, 0), max(width, 0), 3), dtype=np.uint8)
    canvas[:] = BACKGROUND_COLOR
    return canvas


def _to_subpixel_array(stroke: Sequence[Pixel]) -> np.ndarray:
    scale = 1 << SUBPIXEL_BITS
    coords = np.array([[p.x, p.y] for p in stroke], dtype=np.float64)
    return np.round(coords * scale).astype(np.int32).reshape((-1, 1, 2))


def draw_strokes(canvas: np.ndarray,
                 strokes: Sequence[Sequence[Pixel]],
                 line_width: int,
                 color=STROKE_COLOR) -> np.ndarray:
    """
    Draw open polylines on a canvas in place

    Args:
        canvas: BGR image to draw on
        strokes: Polylines in pixel coordinates (row 0 at the top)
        line_width: Stroke width in pixels
        color: Stroke color (BGR)

    Returns:
        The same canvas
    """
    if canvas.size == 0:
        return canvas

    polylines = [_to_subpixel_array(stroke) for stroke in strokes if len(stroke) > 1]
    if polylines:
        cv2.polylines(
            canvas,
            polylines,
            isClosed=False,
            color=color,
            thickness=line_width,
            lineType=cv2.LINE_AA,
            shift=SUBPIXEL_BITS,
        )

    return canvas


def render_strokes(strokes: Sequence[Sequence[Pixel]],
                   width: int,
                   height: int,
                   line_width: int) -> np.ndarray:
    """
    Render strokes onto a new white canvas

    Args:
        strokes: Polylines in pixel coordinates
        width: Canvas width
        height: Canvas height
        line_width: Stroke width in pixels

    Returns:
        BGR image of shape (height, width, 3)
    """
    canvas = create_canvas(width, height)
    return draw_strokes(canvas, strokes, line_width)


def save_png(canvas: np.ndarray, output_path: Union[str, Path]) -> None:
    """
    Write a canvas to a PNG file

    Raises:
        RenderError: If the canvas is empty or cannot be written
    """
    if canvas.size == 0:
        raise RenderError(f"Cannot save an empty {canvas.shape[1]}x{canvas.shape[0]} canvas")

    try:
        written = cv2.imwrite(str(output_path), canvas)
    except cv2.error as e:
        raise RenderError(f"Failed to encode {output_path}: {e}") from e

    if not written:
        raise RenderError(f"Failed to write image {output_path}")

    logger.info(f"Saved path image ({canvas.shape[1]}x{canvas.shape[0]}) to {output_path}")

