from __future__ import annotations

from math import asin, degrees, pi, sin


class GeometryError(ValueError):
    """Geometry inputs that cannot produce a valid tracker drawing."""


def deg2rad(degrees_: float) -> float:
    return degrees_ * pi / 180


def rad2deg(radians: float) -> float:
    return degrees(radians)


def safe_asin(x: float) -> float:
    """
    asin that refuses arguments outside [-1, 1].

    Raises:
        GeometryError: if `x` is outside the domain of asin (or NaN).
    """
    if not -1.0 <= x <= 1.0:
        raise GeometryError(f"asin argument {x} is outside [-1, 1]")
    return asin(x)


def cap_angle_offset(corner_radius: float, cap_center_radius: float) -> float:
    """
    Angle (radians) between a radial cut and the centre of a cap disc.

    A disc of radius `corner_radius` whose centre lies at `cap_center_radius`
    from the arc centre has a chord of length `corner_radius` to the cut point,
    hence `2 * asin(r_c / (2 * ccR))`.
    """
    if cap_center_radius <= 0:
        raise GeometryError(f"Cap centre radius must be positive, got {cap_center_radius}")
    return 2 * safe_asin(corner_radius / (2 * cap_center_radius))


def chord_offset_radius(gap_size: float, segment_angle: float) -> float:
    """
    Distance by which each day's centre is pushed outwards so that two
    neighbouring wedges of `segment_angle` degrees are `gap_size` apart.
    """
    half_sin = sin(deg2rad(segment_angle) / 2)
    if half_sin <= 0:
        raise GeometryError(f"Segment angle {segment_angle} must lie in (0, 360)")
    return gap_size / (2 * half_sin)


def normalize_angle(angle: float) -> float:
    """Map an angle in degrees to [0, 360)."""
    return angle % 360.0
