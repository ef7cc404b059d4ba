"""GPX document model"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class Point:
    """A single recorded fix within a segment"""

    latitude: float
    longitude: float

    def distance(self, other: "Point") -> float:
        """Planar distance to another point, in degrees"""
        return math.hypot(
            self.longitude - other.longitude, self.latitude - other.latitude
        )

    def coordinates(self) -> List[float]:
        """GeoJSON position, longitude first"""
        return [self.longitude, self.latitude]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        """Create from dictionary representation"""
        return cls(latitude=float(data["latitude"]), longitude=float(data["longitude"]))


LatLng = Point


@dataclass(frozen=True)
class Segment:
    """Contiguous run of points as recorded by the device"""

    points: Tuple[Point, ...] = ()


@dataclass(frozen=True)
class Track:
    """One recording session, possibly split into several segments"""

    name: str = ""
    type: str = ""
    segments: Tuple[Segment, ...] = ()

    def points(self) -> List[Point]:
        return [point for segment in self.segments for point in segment.points]


@dataclass(frozen=True)
class GPX:
    """Root element of a GPS Exchange Format document"""

    creator: str = ""
    version: str = ""
    tracks: Tuple[Track, ...] = field(default_factory=tuple)

    def points(self) -> List[Point]:
        """
        Flatten every point of every segment of every track

        Returns:
            Points in document order
        """
        return [point for track in self.tracks for point in track.points()]

    @property
    def point_count(self) -> int:
        return sum(
            len(segment.points) for track in self.tracks for segment in track.segments
        )
