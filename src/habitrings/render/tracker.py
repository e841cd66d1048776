"""
Tracker Compositor
==================
Draws the whole tracker: one ring per habit, one segment per day.

A pass is synchronous and self-contained: the display geometry is computed
from the arguments at the start, every cell is resolved through its ring's
fill lookup and handed to the adaptive segment renderer, and the geometry is
returned to the caller. Nothing is cached between passes.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from habitrings import defaults
from habitrings.model.fill import (
    DEFAULT_PALETTE,
    ColorPalette,
    FillState,
    HighlightCell,
    TrackerRing,
    default_fill_state,
)
from habitrings.model.geometry_primitives import Point
from habitrings.model.geometry_utils import normalize_angle
from habitrings.model.layout import DisplayGeometry, compute_display_geometry
from habitrings.render.segments import draw_adaptive_segment
from habitrings.render.surface import Surface

logger = logging.getLogger(__name__)


def label_rotation(mid_angle: float) -> float:
    """
    Rotation (degrees, clockwise) that lays text along the ring at `mid_angle`
    and keeps it readable: text that would be upside down is turned around.
    """
    rotation = normalize_angle(mid_angle + 90.0)
    if 90.0 < rotation < 270.0:
        rotation = normalize_angle(rotation + 180.0)
    return rotation


def resolve_fill(ring: TrackerRing, day_index: int, palette: ColorPalette, selected: bool) -> FillState:
    fill = ring.fill_lookup(day_index, palette, selected)
    if fill is None:
        return default_fill_state(palette, selected)
    return fill


def draw_cell_label(
    surface: Surface,
    geometry: DisplayGeometry,
    ring_index: int,
    day_index: int,
    text: str,
    palette: ColorPalette,
) -> None:
    mid_angle = geometry.day(day_index).mid_angle
    mid_radius = geometry.ring(ring_index).mid_radius
    position = geometry.center.polar(mid_radius, mid_angle)
    surface.draw_text(text, position, label_rotation(mid_angle), palette.label, defaults.LABEL_FONT_SIZE)


def render_tracker(
    surface: Surface,
    center: Point,
    max_radius: float,
    inner_margin: float,
    rings: Sequence[TrackerRing],
    num_days: int,
    gap_size: float = defaults.DEFAULT_GAP_SIZE,
    start_angle: float = defaults.DEFAULT_START_ANGLE,
    gap_angle: float = defaults.DEFAULT_GAP_ANGLE,
    palette: ColorPalette = DEFAULT_PALETTE,
    highlight: Optional[HighlightCell] = None,
) -> DisplayGeometry:
    """
    Draw every ring x day cell of the tracker onto `surface`.

    Args:
        surface: Where to draw.
        center: Tracker centre.
        max_radius: Outer edge of the outermost ring.
        inner_margin: Inner edge of the innermost ring.
        rings: One entry per habit, innermost first.
        num_days: Segments per ring; day 0 starts at `start_angle`.
        gap_size: Radial and angular gap between cells.
        start_angle: Start of day 0 in degrees.
        gap_angle: Degrees left empty.
        palette: Colours handed to the fill lookups.
        highlight: Cell drawn with the selected colours; its ring shows labels.

    Returns:
        The DisplayGeometry used for the pass.

    Raises:
        GeometryError: if the layout cannot be drawn.
    """
    geometry = compute_display_geometry(
        center=center,
        max_radius=max_radius,
        inner_margin=inner_margin,
        gap_size=gap_size,
        num_days=num_days,
        num_rings=len(rings),
        start_angle=start_angle,
        gap_angle=gap_angle,
    )
    logger.debug(f"Rendering {len(rings)} rings x {num_days} days")

    for ring_index, ring in enumerate(rings):
        # Radii are re-measured from the displaced day centre
        inner_radius = geometry.ring_inner_radii[ring_index] - geometry.effective_center_radius
        innermost = ring_index == 0
        highlighted_ring = highlight is not None and highlight.ring_index == ring_index

        for day_index in range(geometry.num_days):
            day_center = geometry.effective_centers[day_index]
            selected = highlighted_ring and highlight.day_index == day_index
            fill = resolve_fill(ring, day_index, palette, selected)

            draw_adaptive_segment(
                surface,
                more_than_two=geometry.more_than_two,
                innermost=innermost,
                center=day_center,
                start_angle=geometry.day_start_angles[day_index],
                sweep_angle=-geometry.segment_angle,
                inner_radius=inner_radius,
                half_thickness=geometry.half_thickness,
                corner_radius=geometry.corner_radius,
                color=fill.color,
                fill_fraction=fill.fill_fraction,
                background_color=fill.background_color,
                arc_center=day_center,
            )

            if highlighted_ring and fill.label:
                draw_cell_label(surface, geometry, ring_index, day_index, fill.label, palette)

    return geometry
