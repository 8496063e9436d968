"""Pointer and pan state data structures."""
from dataclasses import dataclass, field


@dataclass
class Vec2:
    """2D vector for coordinate pairs.

    Used for pointer locations (widget pixels) and pan offsets (pixel deltas).
    """
    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def clamped(self, limit):
        """Clamp both components to [-limit, limit]."""
        return Vec2(max(-limit, min(limit, self.x)), max(-limit, min(limit, self.y)))


@dataclass(frozen=True)
class PanState:
    """Snapshot of a pan gesture.

    is_active is True only between a start and its matching end;
    offset only changes while is_active.
    """
    is_active: bool = False
    offset: Vec2 = field(default_factory=Vec2)
    last_pointer: Vec2 = field(default_factory=Vec2)
