from __future__ import annotations

import logging
from typing import Optional, Sequence

from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from habitrings.config import TrackerSettings
from habitrings.model.fill import DEFAULT_PALETTE, ColorPalette, HighlightCell, TrackerRing
from habitrings.model.geometry_primitives import Point
from habitrings.model.geometry_utils import GeometryError
from habitrings.model.layout import DisplayGeometry
from habitrings.render.qt_surface import QPainterSurface
from habitrings.render.tracker import render_tracker

logger = logging.getLogger(__name__)


class TrackerWidget(QWidget):
    """
    Paints the habit tracker, recomputing the layout on every paint event
    from the current widget size.
    """
    def __init__(
        self,
        rings: Sequence[TrackerRing] = (),
        settings: Optional[TrackerSettings] = None,
        palette: ColorPalette = DEFAULT_PALETTE,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent=parent)
        self._rings: list[TrackerRing] = list(rings)
        self._settings = settings or TrackerSettings()
        self._palette = palette
        self._highlight: HighlightCell | None = None
        self._background = QColor("#FFFFFF")
        self.last_geometry: DisplayGeometry | None = None

    def sizeHint(self) -> QSize:
        return QSize(454, 454)

    def set_rings(self, rings: Sequence[TrackerRing]) -> None:
        self._rings = list(rings)
        self.update()

    def set_settings(self, settings: TrackerSettings) -> None:
        self._settings = settings
        self.update()

    def set_highlight(self, highlight: HighlightCell | None) -> None:
        self._highlight = highlight
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), self._background)
            if not self._rings:
                self.last_geometry = None
                return

            width, height = self.width(), self.height()
            try:
                self.last_geometry = render_tracker(
                    QPainterSurface(painter),
                    center=Point(width / 2, height / 2),
                    max_radius=self._settings.max_radius(width, height),
                    inner_margin=self._settings.inner_margin,
                    rings=self._rings,
                    num_days=self._settings.num_days,
                    gap_size=self._settings.gap_size,
                    start_angle=self._settings.start_angle,
                    gap_angle=self._settings.gap_angle,
                    palette=self._palette,
                    highlight=self._highlight,
                )
            except GeometryError as e:
                # Skip the frame; the next resize or settings change may fix it
                self.last_geometry = None
                logger.error(f"Skipping tracker frame at {width}x{height}: {e}")
        finally:
            painter.end()
