"""Pixel coordinate used during rendering"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Pixel:
    """Position on the projected pixel grid (X grows east, Y grows north until inverted)"""

    x: float
    y: float

    def distance(self, other: "Pixel") -> float:
        """Euclidean distance to another pixel"""
        return math.hypot(other.x - self.x, other.y - self.y)

    def shifted(self, dx: float, dy: float) -> "Pixel":
        return Pixel(self.x + dx, self.y + dy)
