"""
Geometric Primitives for the radial tracker.

Coordinates are drawing-surface units with the y axis pointing down, so an
angle of 0° points right and positive angles turn clockwise on screen.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

from habitrings.model.geometry_utils import deg2rad


@dataclass(frozen=True)
class Point:
    """A 2D point on the drawing surface."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def polar(self, radius: float, angle_deg: float) -> Point:
        """Point at `radius` from this one in the direction `angle_deg`."""
        angle_rad = deg2rad(angle_deg)
        return Point(
            self.x + radius * math.cos(angle_rad),
            self.y + radius * math.sin(angle_rad)
        )


@dataclass(frozen=True)
class Ring:
    """The radial band of one habit."""
    inner_radius: float
    outer_radius: float

    @property
    def thickness(self) -> float:
        return self.outer_radius - self.inner_radius

    @property
    def half_thickness(self) -> float:
        return self.thickness / 2

    @property
    def mid_radius(self) -> float:
        return (self.inner_radius + self.outer_radius) / 2


@dataclass(frozen=True)
class DaySegment:
    """The angular span of one day. `sweep_angle` is signed."""
    start_angle: float
    sweep_angle: float

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle

    @property
    def mid_angle(self) -> float:
        return self.start_angle + self.sweep_angle / 2


@dataclass(frozen=True)
class CapsuleGeometry:
    """
    End-cap placement of a capsule segment.

    The two cap discs of radius `corner_radius` sit at `cap_center_1` and
    `cap_center_2`, tangent to both radial boundaries of the band. The arc body
    spans `extended_start_angle` .. `extended_start_angle + extended_sweep_angle`.
    """
    corner_radius: float
    cap_center_1: Point
    cap_center_2: Point
    extended_start_angle: float
    extended_sweep_angle: float
