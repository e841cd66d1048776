"""
Offscreen rendering of a tracker into a QImage / PNG file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from PySide6.QtGui import QColor, QImage, QPainter

from habitrings.config import TrackerSettings
from habitrings.model.fill import DEFAULT_PALETTE, ColorPalette, HighlightCell, TrackerRing
from habitrings.model.geometry_primitives import Point
from habitrings.render.qt_surface import QPainterSurface
from habitrings.render.tracker import render_tracker

logger = logging.getLogger(__name__)


def render_to_image(
    rings: Sequence[TrackerRing],
    size: int,
    settings: Optional[TrackerSettings] = None,
    palette: ColorPalette = DEFAULT_PALETTE,
    highlight: Optional[HighlightCell] = None,
    background: str = "#FFFFFF",
) -> QImage:
    """
    Render the tracker centred on a square image of `size` pixels.

    Raises:
        GeometryError: if the settings do not produce a drawable layout.
    """
    if settings is None:
        settings = TrackerSettings()

    image = QImage(size, size, QImage.Format.Format_ARGB32)
    image.fill(QColor(background))

    painter = QPainter(image)
    try:
        render_tracker(
            QPainterSurface(painter),
            center=Point(size / 2, size / 2),
            max_radius=settings.max_radius(size, size),
            inner_margin=settings.inner_margin,
            rings=rings,
            num_days=settings.num_days,
            gap_size=settings.gap_size,
            start_angle=settings.start_angle,
            gap_angle=settings.gap_angle,
            palette=palette,
            highlight=highlight,
        )
    finally:
        painter.end()
    return image


def export_png(image: QImage, path: str | Path) -> Path:
    path = Path(path)
    if not image.save(str(path), "PNG"):
        raise IOError(f"Failed to write image to {path}")
    logger.info(f"Tracker image written to: {path}")
    return path
