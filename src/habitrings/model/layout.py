"""
Display Geometry
================
Everything the tracker needs to know about where rings and days sit,
computed once per redraw from the surface size, ring count and day count.

The per-day and per-ring arrays are computed in one go and frozen, so every
cell of a pass that shares a day index uses bit-identical angles and centres.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from math import sin

import numpy as np

from habitrings import defaults
from habitrings.model.geometry_primitives import DaySegment, Point, Ring
from habitrings.model.geometry_utils import GeometryError, chord_offset_radius, deg2rad

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayGeometry:
    center: Point
    max_radius: float
    inner_margin: float
    gap_size: float
    num_days: int
    num_rings: int
    start_angle: float
    gap_angle: float

    # Derived scalars
    segment_angle: float
    ring_thickness: float
    half_thickness: float
    effective_center_radius: float
    hub_corner_radius: float
    corner_radius: float
    more_than_two: bool

    # Pre-calculated arrays
    day_start_angles: tuple[float, ...]
    ring_inner_radii: tuple[float, ...]
    ring_outer_radii: tuple[float, ...]
    effective_centers: tuple[Point, ...]

    @property
    def total_arc_angle(self) -> float:
        return 360.0 - self.gap_angle

    def ring(self, ring_index: int) -> Ring:
        return Ring(self.ring_inner_radii[ring_index], self.ring_outer_radii[ring_index])

    def day(self, day_index: int) -> DaySegment:
        """Day segment, sweeping backwards (negative) from its start angle."""
        return DaySegment(self.day_start_angles[day_index], -self.segment_angle)


def compute_display_geometry(
    center: Point,
    max_radius: float,
    inner_margin: float,
    gap_size: float,
    num_days: int,
    num_rings: int,
    start_angle: float = defaults.DEFAULT_START_ANGLE,
    gap_angle: float = defaults.DEFAULT_GAP_ANGLE,
) -> DisplayGeometry:
    """
    Lay out `num_rings` concentric rings of `num_days` day segments.

    Args:
        center: Tracker centre on the surface.
        max_radius: Outer radius of the outermost ring.
        inner_margin: Inner radius of the innermost ring.
        gap_size: Radial gap between rings, and visual gap between day wedges.
        num_days: Number of day segments per ring.
        num_rings: Number of rings; ring 0 is the innermost.
        start_angle: Start angle of day 0 in degrees (-90 is 12 o'clock).
        gap_angle: Degrees left empty between the last day and day 0.

    Raises:
        GeometryError: if the combination cannot be drawn.
    """
    if num_days < 1:
        raise GeometryError(f"num_days must be at least 1, got {num_days}")
    if num_rings < 1:
        raise GeometryError(f"num_rings must be at least 1, got {num_rings}")
    if inner_margin <= 0:
        raise GeometryError(f"inner_margin must be positive, got {inner_margin}")
    if max_radius <= inner_margin:
        raise GeometryError(f"max_radius ({max_radius}) must exceed inner_margin ({inner_margin})")
    if gap_size < 0:
        raise GeometryError(f"gap_size must not be negative, got {gap_size}")
    if not 0.0 <= gap_angle < 360.0:
        raise GeometryError(f"gap_angle must lie in [0, 360), got {gap_angle}")

    total_arc_angle = 360.0 - gap_angle
    segment_angle = total_arc_angle / num_days

    available_radius = max_radius - inner_margin
    ring_thickness = (available_radius - (num_rings - 1) * gap_size) / num_rings
    if ring_thickness <= 0:
        raise GeometryError(
            f"{num_rings} rings with gap {gap_size} do not fit between radius {inner_margin} and {max_radius}"
        )
    half_thickness = ring_thickness / 2

    effective_center_radius = chord_offset_radius(gap_size, segment_angle)
    if effective_center_radius < 0 or effective_center_radius >= inner_margin:
        raise GeometryError(
            f"effective centre radius {effective_center_radius:.3f} must be in [0, inner_margin={inner_margin}); "
            f"use a smaller gap or fewer days"
        )

    # Corner circle tangent to the day wedge's edge and to the inner margin
    effective_inner_margin = inner_margin - effective_center_radius
    denominator = 1 - 2 * sin(deg2rad(segment_angle) / 4)
    if denominator <= 0:
        raise GeometryError(f"Segment angle {segment_angle:.3f} is too wide to round the hub corners")
    r_intermediate = effective_inner_margin / denominator
    hub_corner_radius = r_intermediate - effective_inner_margin

    more_than_two = half_thickness > hub_corner_radius
    corner_radius = min(hub_corner_radius, half_thickness)

    # Days run backwards (clockwise on screen is positive, so "backwards" is negative)
    day_start_angles = start_angle - np.arange(num_days) * segment_angle

    # Ring 0 is innermost; the outermost ring ends exactly at max_radius
    reversed_index = num_rings - 1 - np.arange(num_rings)
    ring_outer_radii = max_radius - reversed_index * (ring_thickness + gap_size)
    ring_inner_radii = ring_outer_radii - ring_thickness

    mid_angles = np.deg2rad(day_start_angles - segment_angle / 2)
    centers_x = center.x + effective_center_radius * np.cos(mid_angles)
    centers_y = center.y + effective_center_radius * np.sin(mid_angles)

    geometry = DisplayGeometry(
        center=center,
        max_radius=max_radius,
        inner_margin=inner_margin,
        gap_size=gap_size,
        num_days=num_days,
        num_rings=num_rings,
        start_angle=start_angle,
        gap_angle=gap_angle,
        segment_angle=segment_angle,
        ring_thickness=ring_thickness,
        half_thickness=half_thickness,
        effective_center_radius=effective_center_radius,
        hub_corner_radius=hub_corner_radius,
        corner_radius=corner_radius,
        more_than_two=more_than_two,
        day_start_angles=tuple(float(a) for a in day_start_angles),
        ring_inner_radii=tuple(float(r) for r in ring_inner_radii),
        ring_outer_radii=tuple(float(r) for r in ring_outer_radii),
        effective_centers=tuple(Point(float(x), float(y)) for x, y in zip(centers_x, centers_y)),
    )

    logger.debug(
        f"Geometry: {num_rings} rings x {num_days} days, segment {segment_angle:.2f} deg, "
        f"thickness {ring_thickness:.2f}, hub corner {hub_corner_radius:.2f}, "
        f"offset {effective_center_radius:.2f}, more_than_two={more_than_two}"
    )
    return geometry
