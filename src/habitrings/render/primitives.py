"""
Drawing primitives: stroked annular arcs and partially filled discs.

Both fill radially from the inside out, so an end-cap disc drawn with its
mask centre at the arc centre shows the same curved fill edge as the arc.
"""
from __future__ import annotations

from typing import Optional

from habitrings.model.geometry_primitives import Point
from habitrings.model.geometry_utils import GeometryError
from habitrings.render.surface import Surface


def draw_arc_segment(
    surface: Surface,
    color: str,
    center: Point,
    start_angle: float,
    sweep_angle: float,
    inner_radius: float,
    outer_radius: float,
    fill_fraction: float = 1.0,
    background_color: Optional[str] = None,
) -> None:
    """
    Stroke the annular sector between `inner_radius` and `outer_radius`.

    With 0 < fill_fraction < 1 the background (if any) is drawn at full
    thickness and the foreground covers the inner `fill_fraction` of it.
    """
    if inner_radius < 0:
        raise GeometryError(f"Arc inner radius must not be negative, got {inner_radius}")
    if outer_radius <= inner_radius:
        raise GeometryError(f"Arc outer radius {outer_radius} must exceed inner radius {inner_radius}")

    thickness = outer_radius - inner_radius
    # The stroke is centred on its path
    mid_radius = (inner_radius + outer_radius) / 2

    if fill_fraction >= 1.0:
        surface.draw_arc(color, center, mid_radius, start_angle, sweep_angle, thickness)
        return

    if background_color is not None:
        surface.draw_arc(background_color, center, mid_radius, start_angle, sweep_angle, thickness)

    if fill_fraction <= 0.0:
        return

    partial_thickness = thickness * fill_fraction
    partial_mid_radius = inner_radius + partial_thickness / 2
    surface.draw_arc(color, center, partial_mid_radius, start_angle, sweep_angle, partial_thickness)


def mask_radius(center: Point, radius: float, fill_fraction: float, mask_center: Point) -> float:
    """
    Radius of the clip circle around `mask_center` that exposes `fill_fraction`
    of the disc's diameter along the line joining both centres.

    0 -> touches the disc's near edge, 0.5 -> passes through `center`,
    1 -> covers the whole disc.
    """
    d = center.distance_to(mask_center)
    return d + radius * (2 * fill_fraction - 1)


def draw_partial_disc(
    surface: Surface,
    color: str,
    center: Point,
    radius: float,
    fill_fraction: float,
    background_color: Optional[str] = None,
    mask_center: Optional[Point] = None,
) -> None:
    """
    Fill a disc, clipped to `fill_fraction`.

    Without `mask_center` the fill rises from the bottom of the disc behind a
    horizontal edge; with it, the fill edge is an arc of a circle centred on
    `mask_center`.

    Raises:
        GeometryError: for a non-positive radius, or a mask centre so close to
            the disc that the mask circle would need a negative radius.
    """
    if radius <= 0:
        raise GeometryError(f"Disc radius must be positive, got {radius}")

    if fill_fraction >= 1.0:
        surface.draw_circle(color, center, radius)
        return

    clip_radius = None
    if mask_center is not None and fill_fraction > 0.0:
        clip_radius = mask_radius(center, radius, fill_fraction, mask_center)
        if clip_radius < 0:
            raise GeometryError(
                f"Mask circle around {mask_center} gets a negative radius {clip_radius:.3f} "
                f"for a disc of radius {radius} at {center}"
            )

    if background_color is not None:
        surface.draw_circle(background_color, center, radius)

    if fill_fraction <= 0.0:
        return

    surface.save()
    try:
        if mask_center is not None:
            surface.clip_circle(mask_center, clip_radius)
        else:
            clip_bottom = center.y + radius
            clip_top = clip_bottom - 2 * radius * fill_fraction
            surface.clip_rect(center.x - radius, clip_top, center.x + radius, clip_bottom)
        surface.draw_circle(color, center, radius)
    finally:
        surface.restore()
