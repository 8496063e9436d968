"""Shape catalog for topic outlines.

The catalog order drives the shape selector grid and must not change.
"""
from enum import Enum


class ShapeKind(Enum):
    """Closed set of topic shapes."""
    RECTANGLE = 'rectangle'
    ROUNDED_RECTANGLE = 'rounded_rectangle'
    CIRCLE = 'circle'
    ROUNDED_SQUARE = 'rounded_square'
    LINE = 'line'
    DIAMOND = 'diamond'
    HEXAGON = 'hexagon'
    OCTAGON = 'octagon'
    PARALLELOGRAM = 'parallelogram'
    CLOUD = 'cloud'
    HEART = 'heart'
    SHIELD = 'shield'
    STAR = 'star'
    DOCUMENT = 'document'
    DOUBLE_RECTANGLE = 'double_rectangle'
    FLAG = 'flag'
    LEFT_ARROW = 'left_arrow'
    RIGHT_ARROW = 'right_arrow'


SHAPE_CATALOG = (
    (ShapeKind.RECTANGLE, "Rectangle"),
    (ShapeKind.ROUNDED_RECTANGLE, "Rounded Rectangle"),
    (ShapeKind.CIRCLE, "Circle"),
    (ShapeKind.ROUNDED_SQUARE, "Rounded Square"),
    (ShapeKind.LINE, "Line"),
    (ShapeKind.DIAMOND, "Diamond"),
    (ShapeKind.HEXAGON, "Hexagon"),
    (ShapeKind.OCTAGON, "Octagon"),
    (ShapeKind.PARALLELOGRAM, "Parallelogram"),
    (ShapeKind.CLOUD, "Cloud"),
    (ShapeKind.HEART, "Heart"),
    (ShapeKind.SHIELD, "Shield"),
    (ShapeKind.STAR, "Star"),
    (ShapeKind.DOCUMENT, "Document"),
    (ShapeKind.DOUBLE_RECTANGLE, "Double Rectangle"),
    (ShapeKind.FLAG, "Flag"),
    (ShapeKind.LEFT_ARROW, "Left Arrow"),
    (ShapeKind.RIGHT_ARROW, "Right Arrow"),
)

_LABELS = dict(SHAPE_CATALOG)


def shape_label(shape: ShapeKind) -> str:
    """Display label for a shape."""
    return _LABELS[ShapeKind(shape)]
