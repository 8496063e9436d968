"""
MindFlow View Models - Color Selection

State holder behind the color picker: selected color, opacity and the hex
text shown in the picker's text field.
"""

import logging

from PyQt5.QtCore import QObject, pyqtSignal

from mindflow.constants import (
    COLOR_PALETTE_ROWS, DEFAULT_SELECTED_COLOR_HEX, DEFAULT_OPACITY,
    MIN_OPACITY, MAX_OPACITY,
)
from mindflow.models.color import Color
from mindflow.models.errors import InvalidHexColorError
from mindflow.utils.logger import InvalidInputPolicy, report_invalid_input


# Build preset palette as Color objects (constants boundary - convert once at module load)
COLOR_PALETTE = tuple(
    tuple(Color.from_float(rgba) for rgba in row)
    for row in COLOR_PALETTE_ROWS
)


class ColorSelectionViewModel(QObject):
    """Selected color, opacity and derived hex string.

    hex_value is derived: it is recomputed from selected_color by
    _apply_color(), the only place the color is written.
    """

    colorChanged = pyqtSignal(object)  # Color
    hexValueChanged = pyqtSignal(str)
    opacityChanged = pyqtSignal(float)

    PALETTE = COLOR_PALETTE

    def __init__(self, selected_color=None, opacity=DEFAULT_OPACITY,
                 invalid_input_policy=None, parent=None):
        super().__init__(parent)
        self._logger = logging.getLogger('ColorSelection')
        self.invalid_input_policy = InvalidInputPolicy.coerce(invalid_input_policy)

        if selected_color is None:
            selected_color = Color.from_hex(DEFAULT_SELECTED_COLOR_HEX)
        self._selected_color = None
        self._hex_value = ""
        self._opacity = self._clamp_opacity(opacity)
        self._apply_color(selected_color)

    # ========================================
    # Read-only state
    # ========================================

    @property
    def selected_color(self) -> Color:
        """Current color (a copy - mutate through select_color)"""
        return self._selected_color.copy()

    @property
    def hex_value(self) -> str:
        """RRGGBB of the selected color's RGB channels (no '#', uppercase)"""
        return self._hex_value

    @property
    def opacity(self) -> float:
        return self._opacity

    # ========================================
    # Mutation
    # ========================================

    def select_color(self, color: Color) -> None:
        """Select a color (palette swatch or custom) and refresh the hex text."""
        self._apply_color(color)

    def update_from_hex(self, text: str) -> bool:
        """Select the color typed into the hex field.

        Args:
            text: RRGGBB or #RRGGBB. Exactly six hex digits are required;
                short forms such as FFF and partially typed input are rejected.

        Returns:
            True if the text was a hex color and is now selected.
            False if it was rejected; state is left unchanged and the
            invalid input policy decides whether to warn or raise.
        """
        color = Color.from_hex(text)
        if color is None:
            report_invalid_input(self.invalid_input_policy, self._logger, InvalidHexColorError(text))
            return False
        self._apply_color(color)
        return True

    def set_opacity(self, value: float) -> None:
        """Set opacity, clamped to [0, 1]. The hex text is unaffected."""
        opacity = self._clamp_opacity(value)
        if opacity == self._opacity:
            return
        self._opacity = opacity
        self.opacityChanged.emit(opacity)

    def _apply_color(self, color: Color) -> None:
        if not isinstance(color, Color):
            raise TypeError(f"Expected Color, got {type(color).__name__}")

        color = color.copy()
        if color == self._selected_color:
            return

        self._selected_color = color
        hex_value = color.to_hex(prefix=False)
        self._logger.debug("Selected color %s", hex_value)
        self.colorChanged.emit(color.copy())

        if hex_value != self._hex_value:
            self._hex_value = hex_value
            self.hexValueChanged.emit(hex_value)

    @staticmethod
    def _clamp_opacity(value) -> float:
        return max(MIN_OPACITY, min(MAX_OPACITY, float(value)))
