"""
MindFlow View Models - Shape Selection

State holder behind the shape selector button and its popover grid.
"""

import logging

from PyQt5.QtCore import QObject, pyqtSignal

from mindflow.constants import SHAPE_GRID_COLUMNS
from mindflow.models.shape import ShapeKind, SHAPE_CATALOG, shape_label


class ShapeSelectionViewModel(QObject):
    """Selected topic shape plus the popover open flag."""

    shapeChanged = pyqtSignal(object)  # ShapeKind
    popoverChanged = pyqtSignal(bool)

    # Ordered (ShapeKind, label) pairs; order is the popover grid order
    SHAPES = SHAPE_CATALOG
    GRID_COLUMNS = SHAPE_GRID_COLUMNS

    def __init__(self, selected_shape=ShapeKind.RECTANGLE, parent=None):
        super().__init__(parent)
        self._logger = logging.getLogger('ShapeSelection')
        self._selected_shape = ShapeKind(selected_shape)
        self._is_showing_popover = False

    @property
    def selected_shape(self) -> ShapeKind:
        return self._selected_shape

    @property
    def is_showing_popover(self) -> bool:
        return self._is_showing_popover

    def select_shape(self, shape) -> None:
        """Select a shape and close the popover.

        Args:
            shape: ShapeKind or its string value

        Raises:
            ValueError: shape is not in the catalog
        """
        shape = ShapeKind(shape)
        if shape is not self._selected_shape:
            self._selected_shape = shape
            self._logger.debug("Selected shape %s", shape.value)
            self.shapeChanged.emit(shape)
        self._set_popover(False)

    def show_popover(self) -> None:
        self._set_popover(True)

    def hide_popover(self) -> None:
        self._set_popover(False)

    def toggle_popover(self) -> None:
        self._set_popover(not self._is_showing_popover)

    def label_for(self, shape) -> str:
        return shape_label(shape)

    @property
    def selected_label(self) -> str:
        return shape_label(self._selected_shape)

    def catalog_rows(self):
        """Group the catalog into rows of GRID_COLUMNS for the popover grid."""
        return [
            list(self.SHAPES[i:i + self.GRID_COLUMNS])
            for i in range(0, len(self.SHAPES), self.GRID_COLUMNS)
        ]

    def _set_popover(self, showing: bool) -> None:
        if showing == self._is_showing_popover:
            return
        self._is_showing_popover = showing
        self.popoverChanged.emit(showing)
