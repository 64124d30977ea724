"""Points in the plane with tolerant comparisons."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering

EPS = 1e-10


@total_ordering
@dataclass(frozen=True, eq=False)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self.x - other.x) <= EPS and abs(self.y - other.y) <= EPS

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if abs(self.x - other.x) > EPS:
            return self.x < other.x
        return self.y < other.y


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def deg_to_rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def rad_to_deg(radians: float) -> float:
    return radians * 180.0 / math.pi


def rotate(point: Point, theta: float) -> Point:
    """Rotate ``point`` about the origin by ``theta`` degrees counter-clockwise."""
    rad = deg_to_rad(theta)
    cos, sin = math.cos(rad), math.sin(rad)
    return Point(point.x * cos - point.y * sin, point.x * sin + point.y * cos)