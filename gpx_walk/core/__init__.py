"""Core data structures for GPX Walk"""

from .gpx import GPX, LatLng, Point, Segment, Track
from .pixel import Pixel

__all__ = ["GPX", "Track", "Segment", "Point", "LatLng", "Pixel"]
