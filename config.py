# config.py
# All configurable constants and settings

import os

# Optional debug logging toggle. When enabled, dataset generation, the Galaxy
# renderer and the window loop emit a timestamped trace to logs/debug.txt.
# Disabled by default.
LOG_ENABLED = bool(int(os.getenv("GALAXY_LOG_ENABLED", "0")))
LOG_FILE_PATH = "logs/debug.txt"

# Fixed seed for reproducible galaxies; unset means a fresh galaxy every run.
_seed = os.getenv("GALAXY_SEED")
RANDOM_SEED = int(_seed) if _seed else None

# Window dimensions (portrait, phone-like)
WIDTH = 1080
HEIGHT = 1920

# Frames per second
FPS = 60

BACKGROUND_COLOR = (0, 0, 0)

# Palette
WHITE = (255, 255, 255)
LIGHT_GRAY = (204, 204, 204)
GRAY = (136, 136, 136)
DARK_GRAY = (68, 68, 68)

# Planet defaults
NUMBER_OF_PLANETS = 100
MAX_PLANET_RADIUS = 10.0
MAX_PLANET_ALPHA = 0.5
PLANET_COLORS = (LIGHT_GRAY, GRAY, DARK_GRAY)
PLANET_ANIMATION_DURATION_MS = 30000
PLANET_EASING = os.getenv("GALAXY_PLANET_EASING", "linear")

# Star defaults
NUMBER_OF_STARS = 100
STAR_COLORS = (WHITE, GRAY, DARK_GRAY)
MAX_STAR_SIDE_LENGTH = 8.0
MAX_STAR_EDGE_COUNT = 10
STAR_SHINING_DURATION_MS = 3000
STAR_EASING = os.getenv("GALAXY_STAR_EASING", "fast_out_slow_in")

# Settings dictionary for tweaking at runtime
settings_data = {
    "FPS": FPS,
    "NUMBER_OF_PLANETS": NUMBER_OF_PLANETS,
    "MAX_PLANET_RADIUS": MAX_PLANET_RADIUS,
    "MAX_PLANET_ALPHA": MAX_PLANET_ALPHA,
    "PLANET_ANIMATION_DURATION_MS": PLANET_ANIMATION_DURATION_MS,
    "PLANET_EASING": PLANET_EASING,
    "NUMBER_OF_STARS": NUMBER_OF_STARS,
    "MAX_STAR_SIDE_LENGTH": MAX_STAR_SIDE_LENGTH,
    "MAX_STAR_EDGE_COUNT": MAX_STAR_EDGE_COUNT,
    "STAR_SHINING_DURATION_MS": STAR_SHINING_DURATION_MS,
    "STAR_EASING": STAR_EASING,
}
