"""
Command-line interface: render the demo tracker to a PNG file.

Usage:
    $ python -m habitrings --output tracker.png --size 454 --days 10
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from PySide6.QtGui import QGuiApplication

from habitrings import defaults
from habitrings.config import TrackerSettings
from habitrings.export import export_png, render_to_image
from habitrings.logging_config import setup_logging
from habitrings.model.fill import HighlightCell
from habitrings.model.geometry_utils import GeometryError
from habitrings.model.habits import demo_habits

logger = logging.getLogger("habitrings")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a circular habit tracker to PNG.")
    parser.add_argument("--output", default="tracker.png", help="PNG file to write")
    parser.add_argument("--size", default=454, type=int, help="Image width and height in pixels")
    parser.add_argument("--days", default=defaults.DEFAULT_NUM_DAYS, type=int, help="Number of day segments")
    parser.add_argument(
        "--gap-size", default=defaults.DEFAULT_GAP_SIZE, type=float,
        help="Gap between rings and between day segments",
    )
    parser.add_argument(
        "--gap-angle", default=defaults.DEFAULT_GAP_ANGLE, type=float,
        help="Degrees left empty at the bottom of the tracker",
    )
    parser.add_argument(
        "--start-angle", default=defaults.DEFAULT_START_ANGLE, type=float,
        help="Start angle of day 0 (-90 is 12 o'clock)",
    )
    parser.add_argument(
        "--inner-margin", default=defaults.DEFAULT_INNER_MARGIN, type=float,
        help="Distance from the centre to the innermost ring",
    )
    parser.add_argument(
        "--outer-margin", default=defaults.DEFAULT_OUTER_MARGIN, type=float,
        help="Distance from the image edge to the outermost ring",
    )
    parser.add_argument(
        "--highlight", nargs=2, type=int, metavar=("RING", "DAY"),
        help="Highlight one cell; its ring shows time labels",
    )
    parser.add_argument("--verbose", action="store_true", help="Log geometry details")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    # Text rendering needs a QGuiApplication; no window is ever shown
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QGuiApplication.instance() or QGuiApplication(sys.argv[:1])  # noqa: F841

    settings = TrackerSettings(
        num_days=args.days,
        gap_size=args.gap_size,
        start_angle=args.start_angle,
        gap_angle=args.gap_angle,
        inner_margin=args.inner_margin,
        outer_margin=args.outer_margin,
    )
    highlight = HighlightCell(*args.highlight) if args.highlight else None
    rings = [habit.tracker_ring() for habit in demo_habits(args.days)]

    try:
        image = render_to_image(rings, args.size, settings, highlight=highlight)
    except GeometryError as e:
        logger.error(f"Cannot draw tracker: {e}")
        return 1

    export_png(image, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
