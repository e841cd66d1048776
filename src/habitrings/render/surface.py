"""
Drawing Surfaces
================
The renderer draws through the small `Surface` protocol below, which mirrors
the part of QPainter it needs. Angles use the screen convention: degrees,
0° at 3 o'clock, positive values turn clockwise (y axis points down).

`RecordingSurface` keeps every call as an immutable `DrawCall`, which makes
a render pass comparable and inspectable without a display.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from habitrings.model.geometry_primitives import Point


class Surface(Protocol):
    def save(self) -> None: ...
    def restore(self) -> None: ...
    def clip_rect(self, left: float, top: float, right: float, bottom: float) -> None: ...
    def clip_circle(self, center: Point, radius: float) -> None: ...
    def draw_arc(
        self,
        color: str,
        center: Point,
        radius: float,
        start_angle: float,
        sweep_angle: float,
        width: float,
    ) -> None: ...
    def draw_circle(self, color: str, center: Point, radius: float) -> None: ...
    def draw_text(self, text: str, position: Point, rotation: float, color: str, size: float) -> None: ...


DRAW_OPS = frozenset({"draw_arc", "draw_circle", "draw_text"})


@dataclass(frozen=True)
class DrawCall:
    op: str
    args: dict = field(default_factory=dict)

    @property
    def color(self) -> str | None:
        return self.args.get("color")


class RecordingSurface:
    """Surface that records calls instead of painting."""

    def __init__(self) -> None:
        self.calls: list[DrawCall] = []
        self._depth = 0

    def _record(self, op: str, **args) -> None:
        self.calls.append(DrawCall(op, args))

    @property
    def draws(self) -> list[DrawCall]:
        """Only the calls that put paint on the surface."""
        return [c for c in self.calls if c.op in DRAW_OPS]

    def ops(self) -> list[str]:
        return [c.op for c in self.calls]

    def colors(self) -> set[str]:
        return {c.color for c in self.draws}

    def save(self) -> None:
        self._depth += 1
        self._record("save")

    def restore(self) -> None:
        if self._depth == 0:
            raise RuntimeError("restore() without matching save()")
        self._depth -= 1
        self._record("restore")

    def clip_rect(self, left: float, top: float, right: float, bottom: float) -> None:
        self._record("clip_rect", left=left, top=top, right=right, bottom=bottom)

    def clip_circle(self, center: Point, radius: float) -> None:
        self._record("clip_circle", center=center, radius=radius)

    def draw_arc(
        self,
        color: str,
        center: Point,
        radius: float,
        start_angle: float,
        sweep_angle: float,
        width: float,
    ) -> None:
        self._record(
            "draw_arc", color=color, center=center, radius=radius,
            start_angle=start_angle, sweep_angle=sweep_angle, width=width,
        )

    def draw_circle(self, color: str, center: Point, radius: float) -> None:
        self._record("draw_circle", color=color, center=center, radius=radius)

    def draw_text(self, text: str, position: Point, rotation: float, color: str, size: float) -> None:
        self._record("draw_text", text=text, position=position, rotation=rotation, color=color, size=size)
