"""
Per-cell fill description, the colour palette the host supplies, and the
ring descriptors that tie a habit to its fill lookup.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class FillState:
    """
    How one (ring, day) cell renders.

    fill_fraction = 1 draws `color` only, 0 with a background draws the
    background only, anything in between fills radially from the inner edge.
    Callers clamp `fill_fraction` to [0, 1].
    """
    color: str
    fill_fraction: float = 1.0
    background_color: Optional[str] = None
    label: Optional[str] = None


@dataclass(frozen=True)
class ColorPalette:
    completed: str = "#1565C0"  # dark blue
    not_completed: str = "#BBDEFB"  # pale blue
    no_data: str = "#E0E0E0"  # pale grey
    selected_completed: str = "#2E7D32"  # dark green
    selected_not_completed: str = "#81C784"  # light green
    not_on_time: str = "#BBDEFB"
    label: str = "#000000"


DEFAULT_PALETTE = ColorPalette()

FillLookup = Callable[[int, ColorPalette, bool], Optional[FillState]]


def default_fill_state(palette: ColorPalette, selected: bool = False) -> FillState:
    """FillState for a cell without any recorded data."""
    return FillState(color=palette.selected_not_completed if selected else palette.no_data)


@dataclass(frozen=True)
class TrackerRing:
    """One habit's ring: its id and how to colour each of its days."""
    ring_id: int
    fill_lookup: FillLookup


@dataclass(frozen=True)
class HighlightCell:
    ring_index: int
    day_index: int
