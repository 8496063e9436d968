"""
MindFlow View Models - Data Models

Value types shared by the view models: colors, shapes, pointer/pan state
and the input errors raised under the strict input policy.
"""

from .color import Color, parse_hex
from .shape import ShapeKind, SHAPE_CATALOG, shape_label
from .transform import Vec2, PanState
from .errors import InvalidInputError, InvalidHexColorError, MalformedPanPayloadError

__all__ = [
    'Color', 'parse_hex',
    'ShapeKind', 'SHAPE_CATALOG', 'shape_label',
    'Vec2', 'PanState',
    'InvalidInputError', 'InvalidHexColorError', 'MalformedPanPayloadError',
]
