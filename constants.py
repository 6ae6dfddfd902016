# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework.
These are not expected to change between simulation runs. Tunable run values
(circle count, speed, marker color) live in config.json instead.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Initial window dimensions. The window is resizable; these only set the first frame.
WIDTH = 1280  # Pixels
HEIGHT = 720  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
WHITE = (255, 255, 255)

# Window Title
TITLE = "Circle Intersections"

# Circle appearance
CIRCLE_STROKE_COLOR = WHITE
CIRCLE_ALPHA = 0.5  # 0-1. Circle bodies are semi-transparent.
BACKGROUND_ALPHA = 1.0

# Random colors are drawn as HSL with a random hue and these fixed components.
COLOR_SATURATION = 70  # Percent
COLOR_LIGHTNESS = 50  # Percent

# Intersection markers
INTERSECTION_STROKE_COLOR = WHITE
DEFAULT_INTERSECTION_DOT_RADIUS = 1.0  # Pixels. Replaced once circles are generated.

# Radius range, derived from the shorter viewport side.
MAX_RADIUS_DIVISOR = 3  # max_radius = shorter_side / 3
MIN_RADIUS_RATIO = 0.5  # min_radius = max_radius * 0.5
DOT_RADIUS_DIVISOR = 20  # dot_radius = min_radius / 20

# Logging
LOG_EVERY_N_TICKS = 100

# Parameter panel overlay
PANEL_FONT_SIZE = 18
PANEL_TEXT_COLOR = (230, 230, 230)
PANEL_BACKGROUND_COLOR = (0, 0, 0, 140)  # RGBA
PANEL_PADDING = 8  # Pixels
