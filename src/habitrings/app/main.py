"""
Run with: python -m habitrings.app
"""
from __future__ import annotations

import logging
import sys

from habitrings.app.application import create_app
from habitrings.app.ui.tracker_widget import TrackerWidget
from habitrings.config import load_settings
from habitrings.logging_config import setup_logging
from habitrings.model.fill import HighlightCell
from habitrings.model.habits import demo_habits


def main() -> int:
    """Main entry point for the desktop preview."""
    setup_logging(level=logging.INFO)
    app = create_app()

    settings = load_settings()
    win = TrackerWidget(
        rings=[habit.tracker_ring() for habit in demo_habits(settings.num_days)],
        settings=settings,
    )
    win.set_highlight(HighlightCell(ring_index=1, day_index=0))
    win.setWindowTitle(app.applicationDisplayName())
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
