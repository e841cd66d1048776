"""
Adaptive segment rendering.

A ring no thicker than two corner radii is drawn as a single capsule. Thicker
rings keep corner rounding of radius `r_c` by stacking a plain arc between two
rounded parts:

    RECTANGULAR_ROUNDED  capsule on the outer edge + capsule on the inner edge
    TRIANGULAR_ROUNDED   capsule on the outer edge + one cap disc at the hub
                         side, for the innermost ring whose day wedges narrow
                         towards the centre

The mode depends on global geometry only, never on the cell.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from habitrings.model.geometry_primitives import Point
from habitrings.model.geometry_utils import GeometryError
from habitrings.render.capsule import draw_simple_rounded
from habitrings.render.primitives import draw_arc_segment, draw_partial_disc
from habitrings.render.surface import Surface


class SegmentMode(Enum):
    SIMPLE_ROUNDED = "simple"
    RECTANGULAR_ROUNDED = "rectangular"
    TRIANGULAR_ROUNDED = "triangular"


def select_mode(more_than_two: bool, innermost: bool) -> SegmentMode:
    if not more_than_two:
        return SegmentMode.SIMPLE_ROUNDED
    if innermost:
        return SegmentMode.TRIANGULAR_ROUNDED
    return SegmentMode.RECTANGULAR_ROUNDED


def _draw_middle_band(
    surface: Surface,
    center: Point,
    start_angle: float,
    sweep_angle: float,
    inner_radius: float,
    half_thickness: float,
    corner_radius: float,
    color: str,
    fill_fraction: float,
    background_color: Optional[str],
) -> None:
    draw_arc_segment(
        surface,
        color,
        center,
        start_angle,
        sweep_angle,
        inner_radius + corner_radius,
        inner_radius + 2 * half_thickness - corner_radius,
        fill_fraction=fill_fraction,
        background_color=background_color,
    )


def draw_triangular_rounded(
    surface: Surface,
    center: Point,
    start_angle: float,
    sweep_angle: float,
    inner_radius: float,
    half_thickness: float,
    corner_radius: float,
    color: str,
    fill_fraction: float = 1.0,
    background_color: Optional[str] = None,
    arc_center: Optional[Point] = None,
) -> None:
    _draw_middle_band(
        surface, center, start_angle, sweep_angle, inner_radius, half_thickness,
        corner_radius, color, fill_fraction, background_color,
    )

    # Single rounded tip at the hub side, midway through the span
    tip_center = center.polar(inner_radius + corner_radius, start_angle + sweep_angle / 2)
    draw_partial_disc(
        surface,
        color,
        tip_center,
        corner_radius,
        fill_fraction,
        background_color=background_color,
        mask_center=center,
    )

    draw_simple_rounded(
        surface,
        center,
        start_angle,
        sweep_angle,
        inner_radius + 2 * half_thickness - 2 * corner_radius,
        corner_radius,
        color,
        fill_fraction=fill_fraction,
        background_color=background_color,
        arc_center=arc_center,
    )


def draw_rectangular_rounded(
    surface: Surface,
    center: Point,
    start_angle: float,
    sweep_angle: float,
    inner_radius: float,
    half_thickness: float,
    corner_radius: float,
    color: str,
    fill_fraction: float = 1.0,
    background_color: Optional[str] = None,
    arc_center: Optional[Point] = None,
) -> None:
    _draw_middle_band(
        surface, center, start_angle, sweep_angle, inner_radius, half_thickness,
        corner_radius, color, fill_fraction, background_color,
    )
    for capsule_inner in (inner_radius + 2 * half_thickness - 2 * corner_radius, inner_radius):
        draw_simple_rounded(
            surface,
            center,
            start_angle,
            sweep_angle,
            capsule_inner,
            corner_radius,
            color,
            fill_fraction=fill_fraction,
            background_color=background_color,
            arc_center=arc_center,
        )


def draw_adaptive_segment(
    surface: Surface,
    more_than_two: bool,
    innermost: bool,
    center: Point,
    start_angle: float,
    sweep_angle: float,
    inner_radius: float,
    half_thickness: float,
    corner_radius: float,
    color: str,
    fill_fraction: float = 1.0,
    background_color: Optional[str] = None,
    arc_center: Optional[Point] = None,
) -> SegmentMode:
    """
    Draw one (ring, day) cell with the rounding strategy that fits the ring.

    Args:
        more_than_two: Ring half thickness exceeds the hub corner radius.
        innermost: The ring is the one next to the hub.
        center: Centre the caps are placed around (the day's effective centre).
        inner_radius: Inner edge of the ring, measured from `center`.
        half_thickness: Half of the ring thickness.
        corner_radius: Shared corner radius of the pass.
        arc_center: Centre of the capsule arc bodies, defaults to `center`.

    Returns:
        The mode that was used.
    """
    if half_thickness <= 0:
        raise GeometryError(f"Half thickness must be positive, got {half_thickness}")

    mode = select_mode(more_than_two, innermost)
    match mode:
        case SegmentMode.SIMPLE_ROUNDED:
            draw_simple_rounded(
                surface, center, start_angle, sweep_angle, inner_radius, corner_radius,
                color, fill_fraction=fill_fraction, background_color=background_color,
                arc_center=arc_center,
            )
        case SegmentMode.TRIANGULAR_ROUNDED:
            draw_triangular_rounded(
                surface, center, start_angle, sweep_angle, inner_radius, half_thickness,
                corner_radius, color, fill_fraction=fill_fraction,
                background_color=background_color, arc_center=arc_center,
            )
        case SegmentMode.RECTANGULAR_ROUNDED:
            draw_rectangular_rounded(
                surface, center, start_angle, sweep_angle, inner_radius, half_thickness,
                corner_radius, color, fill_fraction=fill_fraction,
                background_color=background_color, arc_center=arc_center,
            )
    return mode
