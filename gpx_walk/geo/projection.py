# gpx_walk/geo/projection.py

"""
Spherical Mercator (EPSG:900913) projection onto the web tile pixel grid.

All functions are pure and work on IEEE doubles. Latitude and longitude are
not clamped; callers are responsible for passing values inside the valid range.
"""

import math
from typing import Tuple

EARTH_RADIUS = 6378137.0  # meters
TILE_SIZE = 256.0  # pixels
INITIAL_RESOLUTION = 2 * math.pi * EARTH_RADIUS / TILE_SIZE
ORIGIN_SHIFT = 2 * math.pi * EARTH_RADIUS / 2


def resolution(zoom: int) -> float:
    """
    Meters per pixel at the equator for a zoom level

    Args:
        zoom: Non-negative zoom level

    Returns:
        Ground resolution in meters/pixel
    """
    return INITIAL_RESOLUTION / math.pow(2, zoom)


def lat_lon_to_meters(lat: float, lon: float) -> Tuple[float, float]:
    """
    Convert WGS84 latitude/longitude to Spherical Mercator meters

    Args:
        lat: Latitude in degrees
        lon: Longitude in degrees

    Returns:
        (x, y) in projected meters

    Raises:
        ValueError: At the south pole (lat=-90), where the projection diverges
    """
    x = lon * ORIGIN_SHIFT / 180
    y = math.log(math.tan((90 + lat) * math.pi / 360)) / (math.pi / 180)
    y = y * ORIGIN_SHIFT / 180
    return x, y


def meters_to_pixels(x: float, y: float, zoom: int) -> Tuple[float, float]:
    """Convert projected meters to pixel coordinates at a zoom level"""
    res = resolution(zoom)
    px = (x + ORIGIN_SHIFT) / res
    py = (y + ORIGIN_SHIFT) / res
    return px, py


def lat_lon_to_pixels(lat: float, lon: float, zoom: int) -> Tuple[float, float]:
    """Convert WGS84 latitude/longitude to pixel coordinates at a zoom level"""
    x, y = lat_lon_to_meters(lat, lon)
    return meters_to_pixels(x, y, zoom)


def origin_pixels(zoom: int) -> Tuple[float, float]:
    """Pixel coordinates of lat=0, lon=0 at a zoom level"""
    return lat_lon_to_pixels(0, 0, zoom)
