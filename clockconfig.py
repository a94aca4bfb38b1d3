# clockconfig.py - constants and settings for the clock.
import os

# Canvas
CANVAS_WIDTH = 500
CANVAS_HEIGHT = 500
CANVAS_CLEAR_COLOR = (1, 1, 1)

# Seconds between two frames
TICK_INTERVAL = 1.0

# Runtime settings
OUTPUT_PATH = os.getenv("CLOCK_OUTPUT", "clock.png")
LOG_LEVEL = os.getenv("CLOCK_LOG_LEVEL", "INFO")

# Colors are (r, g, b) with components in 0..1

# Face
FACE_COLOR = (245 / 255, 245 / 255, 245 / 255)
FACE_RADIUS = 210
CAP_COLOR = (1, 102 / 255, 0)
CAP_RADIUS = 10

# Arc spanning the hour and minute arrows
SPAN_COLOR = (1, 161 / 255, 99 / 255)
SPAN_RADIUS = 120
SPAN_WIDTH = 3
SPAN_SHADOW_OFFSET = 3

# Marks at 12, 3, 6 and 9 o'clock as (start, end) radians
STAMP_COLOR = (128 / 255, 128 / 255, 128 / 255)
STAMP_RADIUS = 110
STAMP_WIDTH = 15
STAMPS = [(6.26, 0.02), (1.55, 1.59), (3.12, 3.16), (4.69, 4.73)]

# Arrows
SHADOW_COLOR = (229 / 255, 228 / 255, 228 / 255)
SHADOW_SHIFT = 2  # degrees
ARROW_COLOR = (51 / 255, 51 / 255, 51 / 255)
ARROW_BASE = 3
MINUTE_LENGTH = 200
MINUTE_WIDTH = 5
HOUR_LENGTH = 150
HOUR_WIDTH = 8
SECOND_COLOR = STAMP_COLOR
SECOND_LENGTH = 200
SECOND_WIDTH = 3
