"""
Layout defaults shared by the drawing engine and its hosts.

Plain numbers only: importing this module must not pull in Qt, so the engine
stays usable with any drawing surface.
"""

# Layout (drawing-surface units / degrees)
DEFAULT_NUM_DAYS: int = 10
DEFAULT_GAP_SIZE: float = 5.0
DEFAULT_START_ANGLE: float = -90.0  # 12 o'clock
DEFAULT_GAP_ANGLE: float = 45.0  # unused wedge after the last day
DEFAULT_INNER_MARGIN: float = 40.0  # centre to innermost ring
DEFAULT_OUTER_MARGIN: float = 30.0  # surface edge to outermost ring

LABEL_FONT_SIZE: float = 14.0
