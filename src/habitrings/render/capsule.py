"""
Capsule segments: an arc band whose two ends are rounded by discs of the
band's half thickness.

Placement of the end caps
-------------------------
The cap discs have radius `r_c` and their centres sit on the band's mid
circle, `ccR = inner_radius + r_c` from the arc centre, so each disc touches
both the inner and the outer edge of the band. The centres are offset from the
radial cuts by the angle whose chord at `ccR` is `r_c`:

    delta = 2 * asin(r_c / (2 * ccR))
    cap 1 at start - delta, cap 2 at start + sweep + delta

The arc body runs between the two cap centres. The tracker sweeps days
backwards (negative sweep), which moves both caps into the day's span so the
discs' outer halves form the rounded ends.
"""
from __future__ import annotations

from typing import Optional

from habitrings.model.geometry_primitives import CapsuleGeometry, Point
from habitrings.model.geometry_utils import GeometryError, cap_angle_offset, rad2deg
from habitrings.render.primitives import draw_arc_segment, draw_partial_disc
from habitrings.render.surface import Surface


def solve_capsule(
    center: Point,
    start_angle: float,
    sweep_angle: float,
    inner_radius: float,
    corner_radius: float,
) -> CapsuleGeometry:
    """
    Compute end-cap centres and extended angles for a capsule of thickness
    `2 * corner_radius` starting at `inner_radius`.

    Raises:
        GeometryError: for a non-positive corner radius, a negative inner
            radius, or a cap that cannot fit on the band.
    """
    if corner_radius <= 0:
        raise GeometryError(f"Corner radius must be positive, got {corner_radius}")
    if inner_radius < 0:
        raise GeometryError(f"Capsule inner radius must not be negative, got {inner_radius}")

    cc_r = inner_radius + corner_radius
    delta = rad2deg(cap_angle_offset(corner_radius, cc_r))

    theta_1 = start_angle - delta
    theta_2 = start_angle + sweep_angle + delta

    return CapsuleGeometry(
        corner_radius=corner_radius,
        cap_center_1=center.polar(cc_r, theta_1),
        cap_center_2=center.polar(cc_r, theta_2),
        extended_start_angle=theta_1,
        extended_sweep_angle=theta_2 - theta_1,
    )


def draw_simple_rounded(
    surface: Surface,
    center: Point,
    start_angle: float,
    sweep_angle: float,
    inner_radius: float,
    corner_radius: float,
    color: str,
    fill_fraction: float = 1.0,
    background_color: Optional[str] = None,
    arc_center: Optional[Point] = None,
) -> CapsuleGeometry:
    """
    Draw one capsule spanning `[inner_radius, inner_radius + 2 * corner_radius]`.

    The caps are placed (and fill-masked) around `center`; the arc body is
    drawn around `arc_center`, which defaults to `center`.
    """
    if arc_center is None:
        arc_center = center

    capsule = solve_capsule(center, start_angle, sweep_angle, inner_radius, corner_radius)

    draw_arc_segment(
        surface,
        color,
        arc_center,
        capsule.extended_start_angle,
        capsule.extended_sweep_angle,
        inner_radius,
        inner_radius + 2 * corner_radius,
        fill_fraction=fill_fraction,
        background_color=background_color,
    )
    for cap_center in (capsule.cap_center_1, capsule.cap_center_2):
        draw_partial_disc(
            surface,
            color,
            cap_center,
            corner_radius,
            fill_fraction,
            background_color=background_color,
            mask_center=center,
        )
    return capsule
