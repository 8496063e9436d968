"""
MindFlow View Models - Constants and Configuration

This module contains all constant values used by the view models:
- Color picker palette (preset swatches)
- Shape selector grid layout
- Pan gesture signal names and payload key
- Defaults for opacity and invalid-input handling
"""

# ======================================================================
# COLOR PICKER PALETTE
# ======================================================================
# Rows are listed in the order they appear in the color picker grid.
# Each entry is [r, g, b, alpha] in 0-1 range.

_GREY = 0.5

COLOR_PALETTE_ROWS = [
    # Neutrals: white, translucent greys, grey, black
    [
        [1.0, 1.0, 1.0, 1.0],
        [_GREY, _GREY, _GREY, 0.2],
        [_GREY, _GREY, _GREY, 0.4],
        [_GREY, _GREY, _GREY, 0.6],
        [_GREY, _GREY, _GREY, 0.8],
        [_GREY, _GREY, _GREY, 1.0],
        [0.0, 0.0, 0.0, 1.0],
    ],
    # Pastels
    [
        [1.0, 0.85, 0.0, 1.0],
        [1.0, 0.63, 0.48, 1.0],
        [0.6, 0.98, 0.6, 1.0],
        [0.25, 0.88, 0.82, 1.0],
        [0.53, 0.81, 0.92, 1.0],
        [0.39, 0.58, 0.93, 1.0],
        [0.87, 0.63, 0.87, 1.0],
        [1.0, 0.41, 0.71, 1.0],
        [1.0, 0.75, 0.8, 1.0],
    ],
    [
        [1.0, 0.72, 0.0, 1.0],
        [1.0, 0.55, 0.35, 1.0],
        [0.47, 0.98, 0.47, 1.0],
        [0.13, 0.88, 0.82, 1.0],
        [0.4, 0.81, 0.92, 1.0],
        [0.27, 0.46, 0.93, 1.0],
        [0.74, 0.5, 0.87, 1.0],
        [1.0, 0.29, 0.71, 1.0],
        [1.0, 0.63, 0.67, 1.0],
    ],
    [
        [1.0, 0.59, 0.0, 1.0],
        [1.0, 0.42, 0.23, 1.0],
        [0.35, 0.98, 0.35, 1.0],
        [0.0, 0.88, 0.82, 1.0],
        [0.28, 0.81, 0.92, 1.0],
        [0.14, 0.34, 0.93, 1.0],
        [0.62, 0.38, 0.87, 1.0],
        [1.0, 0.16, 0.71, 1.0],
        [1.0, 0.5, 0.55, 1.0],
    ],
    # Saturated
    [
        [1.0, 0.47, 0.0, 1.0],
        [1.0, 0.3, 0.1, 1.0],
        [0.22, 0.98, 0.22, 1.0],
        [0.0, 0.75, 0.69, 1.0],
        [0.15, 0.81, 0.92, 1.0],
        [0.02, 0.21, 0.93, 1.0],
        [0.49, 0.25, 0.87, 1.0],
        [1.0, 0.04, 0.71, 1.0],
        [1.0, 0.38, 0.42, 1.0],
    ],
]

# ======================================================================
# COLOR SELECTION DEFAULTS
# ======================================================================

DEFAULT_SELECTED_COLOR_HEX = '000000'
DEFAULT_OPACITY = 1.0
MIN_OPACITY = 0.0
MAX_OPACITY = 1.0

# Swatch button size in the color picker panel (pixels)
COLOR_SWATCH_SIZE = 24

# ======================================================================
# SHAPE SELECTOR
# ======================================================================

# Number of columns in the shape popover grid
SHAPE_GRID_COLUMNS = 3

# ======================================================================
# PAN GESTURE SIGNALS
# ======================================================================
# Names of the three pan signals and the payload key carrying the pointer

PAN_START_SIGNAL = 'PanStart'
PAN_MOVE_SIGNAL = 'PanMove'
PAN_END_SIGNAL = 'PanEnd'
PAN_SIGNAL_NAMES = (PAN_START_SIGNAL, PAN_MOVE_SIGNAL, PAN_END_SIGNAL)

PAN_LOCATION_KEY = 'location'

# ======================================================================
# INVALID INPUT HANDLING
# ======================================================================
# How fallible input (hex text, pan payloads) is reported by default.
# One of: 'ignore', 'warn', 'raise'

DEFAULT_INVALID_INPUT_POLICY = 'ignore'
