"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path
from types import MappingProxyType

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

OUTPUT_PATH = Path(os.environ.get("TIMELINE_OUTPUT_PATH", "out.png"))

# =============================================================================
# INPUT FORMAT
# =============================================================================

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"  # e.g., "2024-01-01 09:30:00"

# Positional columns in every sheet
START_COL = 0
END_COL = 1
NAME_COL = 2
COLOR_COL = 3

HEADER_ROWS = 1  # First row of every sheet is a header

# =============================================================================
# COLORS (RGBA, 0-255)
# =============================================================================

COLORS = MappingProxyType({
    "black": (0, 0, 0, 255),
    "white": (255, 255, 255, 255),
    "red": (255, 0, 0, 255),
    "green": (0, 255, 0, 255),
    "blue": (0, 0, 255, 255),
    "yellow": (255, 255, 0, 255),
})

DEFAULT_COLOR = COLORS["black"]
BACKGROUND_COLOR = COLORS["white"]

# =============================================================================
# RENDER CONFIGURATION
# =============================================================================

ROW_HEIGHT_PX = 10
MIN_CANVAS_HEIGHT_PX = 100  # Below this, use the fallback height
FALLBACK_CANVAS_HEIGHT_PX = 1000

DEFAULT_WIDTH = float(os.environ.get("TIMELINE_DEFAULT_WIDTH", "4000"))
DPI = 100
