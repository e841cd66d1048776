from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFontMetricsF, QPainter, QPainterPath, QPen

from habitrings.model.geometry_primitives import Point


def _circle_rect(center: Point, radius: float) -> QRectF:
    return QRectF(center.x - radius, center.y - radius, 2 * radius, 2 * radius)


class QPainterSurface:
    """
    Surface backed by an active QPainter.

    The painter belongs to the caller (a widget's paintEvent, a QImage export);
    this class never begins or ends it. Qt measures angles counter-clockwise,
    so screen-convention angles are negated on the way in.
    """
    def __init__(self, painter: QPainter, antialias: bool = True) -> None:
        self.painter = painter
        if antialias:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)

    def _clip_operation(self) -> Qt.ClipOperation:
        if self.painter.hasClipping():
            return Qt.ClipOperation.IntersectClip
        return Qt.ClipOperation.ReplaceClip

    def save(self) -> None:
        self.painter.save()

    def restore(self) -> None:
        self.painter.restore()

    def clip_rect(self, left: float, top: float, right: float, bottom: float) -> None:
        rect = QRectF(left, top, right - left, bottom - top)
        self.painter.setClipRect(rect, self._clip_operation())

    def clip_circle(self, center: Point, radius: float) -> None:
        path = QPainterPath()
        path.addEllipse(_circle_rect(center, radius))
        self.painter.setClipPath(path, self._clip_operation())

    def draw_arc(
        self,
        color: str,
        center: Point,
        radius: float,
        start_angle: float,
        sweep_angle: float,
        width: float,
    ) -> None:
        rect = _circle_rect(center, radius)
        path = QPainterPath()
        path.arcMoveTo(rect, -start_angle)
        path.arcTo(rect, -start_angle, -sweep_angle)

        pen = QPen(QColor(color))
        pen.setWidthF(width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        self.painter.strokePath(path, pen)

    def draw_circle(self, color: str, center: Point, radius: float) -> None:
        path = QPainterPath()
        path.addEllipse(_circle_rect(center, radius))
        self.painter.fillPath(path, QBrush(QColor(color)))

    def draw_text(self, text: str, position: Point, rotation: float, color: str, size: float) -> None:
        painter = self.painter
        painter.save()
        try:
            font = painter.font()
            font.setPixelSize(max(1, round(size)))
            painter.setFont(font)
            painter.setPen(QColor(color))

            painter.translate(position.x, position.y)
            painter.rotate(rotation)

            # Centre the text box on the (rotated) origin
            metrics = QFontMetricsF(font)
            width = metrics.horizontalAdvance(text)
            baseline = (metrics.ascent() - metrics.descent()) / 2
            painter.drawText(QPointF(-width / 2, baseline), text)
        finally:
            painter.restore()
