"""Geographic projection helpers"""

from .projection import (
    EARTH_RADIUS,
    ORIGIN_SHIFT,
    TILE_SIZE,
    lat_lon_to_meters,
    lat_lon_to_pixels,
    meters_to_pixels,
    origin_pixels,
    resolution,
)

__all__ = [
    "EARTH_RADIUS",
    "TILE_SIZE",
    "ORIGIN_SHIFT",
    "resolution",
    "lat_lon_to_meters",
    "meters_to_pixels",
    "lat_lon_to_pixels",
    "origin_pixels",
]
