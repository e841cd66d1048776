"""
Configuration
=============
Central registry for the tracker's layout defaults and their persistence.

The geometry engine itself takes every value as an argument and reads its
defaults from `habitrings.defaults`. This module is host side: it bundles those
defaults into TrackerSettings and stores user overrides through QSettings (INI
format), the same way the desktop application does.

Exports:
    TrackerSettings: Layout parameters for one tracker.
    load_settings / save_settings: QSettings round trip.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
import logging
from typing import Optional

from PySide6.QtCore import QSettings

from habitrings.defaults import (
    DEFAULT_GAP_ANGLE,
    DEFAULT_GAP_SIZE,
    DEFAULT_INNER_MARGIN,
    DEFAULT_NUM_DAYS,
    DEFAULT_OUTER_MARGIN,
    DEFAULT_START_ANGLE,
)

logger = logging.getLogger(__name__)

ORG_ID = "habitrings"
APP_ID = "habit-rings"

_SETTINGS_GROUP = "tracker"


@dataclass
class TrackerSettings:
    num_days: int = DEFAULT_NUM_DAYS
    gap_size: float = DEFAULT_GAP_SIZE
    start_angle: float = DEFAULT_START_ANGLE
    gap_angle: float = DEFAULT_GAP_ANGLE
    inner_margin: float = DEFAULT_INNER_MARGIN
    outer_margin: float = DEFAULT_OUTER_MARGIN

    def max_radius(self, width: float, height: float) -> float:
        """Radius of the outermost ring edge for a surface of the given size."""
        return min(width, height) / 2 - self.outer_margin


def load_settings(settings: Optional[QSettings] = None) -> TrackerSettings:
    """
    Read TrackerSettings from QSettings, falling back to defaults per key.

    Args:
        settings: Store to read from. Defaults to the application-wide QSettings.
    """
    if settings is None:
        settings = QSettings()

    values = TrackerSettings()
    settings.beginGroup(_SETTINGS_GROUP)
    try:
        for f in fields(TrackerSettings):
            default = getattr(values, f.name)
            raw = settings.value(f.name, default)
            try:
                setattr(values, f.name, type(default)(raw))
            except (TypeError, ValueError):
                logger.warning(f"Ignoring invalid setting {f.name}={raw!r}, using {default}")
    finally:
        settings.endGroup()
    return values


def save_settings(values: TrackerSettings, settings: Optional[QSettings] = None) -> None:
    """Write TrackerSettings to QSettings."""
    if settings is None:
        settings = QSettings()

    settings.beginGroup(_SETTINGS_GROUP)
    try:
        for f in fields(TrackerSettings):
            settings.setValue(f.name, getattr(values, f.name))
    finally:
        settings.endGroup()
    settings.sync()
    logger.debug(f"Saved tracker settings: {values}")
