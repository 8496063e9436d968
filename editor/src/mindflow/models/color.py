"""
MindFlow View Models - Color Domain Model

Canonical color representation for the color picker.
All hex parsing and formatting flows through this class.
"""

import string
from typing import List, Optional, Tuple


_HEX_DIGITS = frozenset(string.hexdigits)


def _clamp_channel(value) -> int:
    return max(0, min(255, int(value)))


def _clamp_alpha(value) -> float:
    return max(0.0, min(1.0, float(value)))


def parse_hex(hex_string: str) -> Optional[Tuple[int, int, int]]:
    """Parse RRGGBB or #RRGGBB into an (r, g, b) tuple.

    Surrounding whitespace is ignored and digits are case-insensitive.

    Returns:
        (r, g, b) in 0-255 range, or None if the text is not a hex color
    """
    if not isinstance(hex_string, str):
        return None

    hex_string = hex_string.strip()
    if hex_string.startswith('#'):
        hex_string = hex_string[1:]

    # Must be exactly 6 hex digits
    if len(hex_string) != 6 or not _HEX_DIGITS.issuperset(hex_string):
        return None

    return (int(hex_string[0:2], 16), int(hex_string[2:4], 16), int(hex_string[4:6], 16))


class Color:
    """Mutable color with uint8 RGB storage and a float alpha.

    Internal storage: _r, _g, _b (uint8 0-255), _alpha (float 0-1)

    The hex encoding covers RGB only; alpha never appears in it.
    Modifications ONLY through the setter methods, which clamp their input.
    """

    def __init__(self, r: int, g: int, b: int, alpha: float = 1.0):
        """Direct construction from RGB uint8 values (0-255).

        Args:
            r: Red component (0-255)
            g: Green component (0-255)
            b: Blue component (0-255)
            alpha: Alpha (0-1)
        """
        self._r = _clamp_channel(r)
        self._g = _clamp_channel(g)
        self._b = _clamp_channel(b)
        self._alpha = _clamp_alpha(alpha)

    @property
    def r(self) -> int:
        """Red component (0-255) - READ ONLY"""
        return self._r

    @property
    def g(self) -> int:
        """Green component (0-255) - READ ONLY"""
        return self._g

    @property
    def b(self) -> int:
        """Blue component (0-255) - READ ONLY"""
        return self._b

    @property
    def alpha(self) -> float:
        """Alpha (0-1) - READ ONLY"""
        return self._alpha

    # ========================================
    # Setter Methods
    # ========================================

    def set_hex(self, hex_string: str) -> bool:
        """Set RGB from hex string RRGGBB or #RRGGBB. Alpha is kept.

        Returns:
            True if parse succeeded, False otherwise (color untouched)
        """
        rgb = parse_hex(hex_string)
        if rgb is None:
            return False
        self._r, self._g, self._b = rgb
        return True

    def set_rgb255(self, r: int, g: int, b: int) -> None:
        """Set RGB from uint8 values (0-255). Alpha is kept."""
        self._r = _clamp_channel(r)
        self._g = _clamp_channel(g)
        self._b = _clamp_channel(b)

    # ========================================
    # Output Methods
    # ========================================

    def to_float4(self) -> List[float]:
        """Convert to normalized float RGBA [0-1].

        Returns:
            List of [r, g, b, alpha] in 0-1 range
        """
        return [self._r / 255.0, self._g / 255.0, self._b / 255.0, self._alpha]

    def to_hex(self, prefix: bool = True) -> str:
        """Convert to hex color string of the RGB channels.

        Args:
            prefix: Include the leading '#'

        Returns:
            '#RRGGBB' (or 'RRGGBB' without prefix), uppercase
        """
        digits = f"{self._r:02X}{self._g:02X}{self._b:02X}"
        return f"#{digits}" if prefix else digits

    def to_qcolor(self):
        """Convert to PyQt5 QColor object.

        Returns:
            QColor: Qt color object for UI rendering
        """
        from PyQt5.QtGui import QColor
        return QColor(self._r, self._g, self._b, int(round(self._alpha * 255)))

    def to_rgb255(self) -> List[int]:
        return [self._r, self._g, self._b]

    def to_css(self) -> str:
        """Convert to an rgba() string for Qt stylesheets."""
        return f"rgba({self._r}, {self._g}, {self._b}, {int(round(self._alpha * 255))})"

    def copy(self) -> 'Color':
        return Color(self._r, self._g, self._b, self._alpha)

    # ========================================
    # Static Factory Methods
    # ========================================

    @staticmethod
    def from_hex(hex_string: str, alpha: float = 1.0) -> Optional['Color']:
        """Create Color from hex string: #RRGGBB or RRGGBB.

        Args:
            hex_string: Hex color string with or without leading #
            alpha: Alpha for the new color (0-1)

        Returns:
            Color object if parse succeeds, None otherwise
        """
        rgb = parse_hex(hex_string)
        if rgb is None:
            return None
        return Color(*rgb, alpha=alpha)

    @staticmethod
    def from_float(rgba_float: List[float]) -> 'Color':
        """Create Color from normalized floats [r, g, b] or [r, g, b, alpha]."""
        alpha = rgba_float[3] if len(rgba_float) > 3 else 1.0
        return Color(
            round(rgba_float[0] * 255),
            round(rgba_float[1] * 255),
            round(rgba_float[2] * 255),
            alpha=alpha,
        )

    @staticmethod
    def from_rgb255(r: int, g: int, b: int, alpha: float = 1.0) -> 'Color':
        """Alias for the constructor for consistency with other factory methods."""
        return Color(r, g, b, alpha=alpha)

    @staticmethod
    def from_qcolor(qcolor) -> 'Color':
        return Color(qcolor.red(), qcolor.green(), qcolor.blue(), alpha=qcolor.alphaF())

    # ========================================
    # Equality and Hashing
    # ========================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self._r, self._g, self._b, self._alpha) == (other._r, other._g, other._b, other._alpha)

    def __hash__(self) -> int:
        return hash((self._r, self._g, self._b, self._alpha))

    def __repr__(self) -> str:
        if self._alpha < 1.0:
            return f"Color({self._r}, {self._g}, {self._b}, alpha={self._alpha:g})"
        return f"Color({self._r}, {self._g}, {self._b})"

    def __str__(self) -> str:
        """String representation - uses hex format."""
        return self.to_hex()
