"""
MindFlow View Models

Observable state holders consumed by the Qt widgets in components/.
Each is an independent QObject; they share no state with each other.
"""

from .color_selection import ColorSelectionViewModel, COLOR_PALETTE
from .shape_selection import ShapeSelectionViewModel
from .pan_gesture import PanGestureViewModel, PanSignalChannel, PanPhase

__all__ = [
    'ColorSelectionViewModel', 'COLOR_PALETTE',
    'ShapeSelectionViewModel',
    'PanGestureViewModel', 'PanSignalChannel', 'PanPhase',
]
