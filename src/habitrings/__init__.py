"""Circular multi-ring habit tracker renderer."""
from habitrings.model.fill import ColorPalette, DEFAULT_PALETTE, FillState, HighlightCell, TrackerRing
from habitrings.model.geometry_primitives import Point
from habitrings.model.geometry_utils import GeometryError
from habitrings.model.layout import DisplayGeometry, compute_display_geometry
from habitrings.render.tracker import render_tracker

__all__ = [
    "ColorPalette",
    "DEFAULT_PALETTE",
    "DisplayGeometry",
    "FillState",
    "GeometryError",
    "HighlightCell",
    "Point",
    "TrackerRing",
    "compute_display_geometry",
    "render_tracker",
]
