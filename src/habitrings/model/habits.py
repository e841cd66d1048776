"""
Habit Fill Lookups
==================
Turns recorded habit data into the per-cell FillState the tracker draws.

The renderer knows nothing about habit types. Each ring gets a fill lookup,
`lookup(day_index, palette, selected) -> FillState | None`, and the builders
below produce one per habit type:

    binary      - done / not done / no data
    time-based  - completion time compared with a target "HH:MM"
    multiple    - completions counted against a daily target, drawn as partial fill

Returning None means "no data" and lets the renderer fall back to its default.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from habitrings.model.fill import ColorPalette, FillLookup, FillState, TrackerRing


class HabitKind(Enum):
    BINARY = "binary"
    TIME_BASED = "time_based"
    MULTIPLE = "multiple"


def binary_fill(completions: Mapping[int, Optional[bool]]) -> FillLookup:
    def lookup(day_index: int, palette: ColorPalette, selected: bool) -> Optional[FillState]:
        if day_index not in completions:
            return None
        done = completions[day_index]
        if selected:
            return FillState(palette.selected_completed if done else palette.selected_not_completed)
        if done is None:
            return FillState(palette.no_data)
        return FillState(palette.completed if done else palette.not_completed)

    return lookup


def time_based_fill(completion_times: Mapping[int, Optional[str]], target_time: str) -> FillLookup:
    """
    Times are zero-padded "HH:MM" strings, so string order is time order.
    The recorded time is attached as the cell label.
    """
    def lookup(day_index: int, palette: ColorPalette, selected: bool) -> Optional[FillState]:
        completion_time = completion_times.get(day_index)
        if completion_time is None:
            return None
        on_time = completion_time <= target_time
        if selected:
            color = palette.selected_completed if on_time else palette.selected_not_completed
        else:
            color = palette.completed if on_time else palette.not_on_time
        return FillState(color, label=completion_time)

    return lookup


def multiple_fill(counts: Mapping[int, int], completions_per_day: int) -> FillLookup:
    if completions_per_day < 1:
        raise ValueError(f"completions_per_day must be at least 1, got {completions_per_day}")

    def lookup(day_index: int, palette: ColorPalette, selected: bool) -> Optional[FillState]:
        count = counts.get(day_index, 0)
        fill_fraction = min(max(count / completions_per_day, 0.0), 1.0)
        if selected:
            return FillState(palette.selected_completed, fill_fraction, palette.selected_not_completed)
        return FillState(palette.completed, fill_fraction, palette.no_data)

    return lookup


@dataclass
class Habit:
    habit_id: int
    name: str
    abbreviation: str
    kind: HabitKind = HabitKind.BINARY
    target_time: str = "12:00"
    completions_per_day: int = 3

    # day index -> recorded value (bool | None, "HH:MM", or count depending on kind)
    records: dict[int, object] = field(default_factory=dict)

    def fill_lookup(self) -> FillLookup:
        if self.kind is HabitKind.TIME_BASED:
            return time_based_fill(self.records, self.target_time)
        if self.kind is HabitKind.MULTIPLE:
            return multiple_fill(self.records, self.completions_per_day)
        return binary_fill(self.records)

    def tracker_ring(self) -> TrackerRing:
        return TrackerRing(ring_id=self.habit_id, fill_lookup=self.fill_lookup())


def demo_habits(num_days: int = 10) -> list[Habit]:
    """A fixed set of habits with plausible history, for the app and the CLI."""
    days = range(num_days)
    return [
        Habit(
            habit_id=1, name="Meditate", abbreviation="MED", kind=HabitKind.BINARY,
            records={d: (d % 3 != 1) if d % 5 != 4 else None for d in days},
        ),
        Habit(
            habit_id=2, name="Wake up", abbreviation="WAK", kind=HabitKind.TIME_BASED,
            target_time="07:00",
            records={d: f"{6 + d % 3:02d}:{(d * 17) % 60:02d}" for d in days if d % 4 != 3},
        ),
        Habit(
            habit_id=3, name="Drink water", abbreviation="H2O", kind=HabitKind.MULTIPLE,
            completions_per_day=4,
            records={d: d % 5 for d in days},
        ),
    ]
