"""
MindFlow View Models - Color Picker Panel

Widget bound to a ColorSelectionViewModel.
Converts to/from Qt primitives only at external API boundaries (QColorDialog, stylesheets).
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QPushButton, QLabel,
    QLineEdit, QSlider, QColorDialog,
)
from PyQt5.QtCore import Qt

from mindflow.constants import COLOR_SWATCH_SIZE
from mindflow.models.color import Color
from mindflow.models.errors import InvalidInputError
from mindflow.utils.logger import loggerRaise


class ColorPickerPanel(QWidget):
    """Palette swatches, hex field, opacity slider and custom color button.

    All state lives in the view model; the panel only forwards user input
    and mirrors the view model's change signals.
    """

    def __init__(self, view_model, parent=None):
        super().__init__(parent)
        self.view_model = view_model
        self.swatch_buttons = []
        self._setup_ui()

        view_model.colorChanged.connect(self._on_color_changed)
        view_model.hexValueChanged.connect(self._on_hex_value_changed)
        view_model.opacityChanged.connect(self._on_opacity_changed)

    def _setup_ui(self):
        """Build the swatch grid and the editing row"""
        layout = QVBoxLayout(self)
        layout.setSpacing(8)
        layout.setContentsMargins(10, 10, 10, 10)

        grid_layout = QGridLayout()
        grid_layout.setSpacing(4)
        for row, colors in enumerate(self.view_model.PALETTE):
            for col, color in enumerate(colors):
                btn = create_color_button(color)
                btn.clicked.connect(lambda checked=False, c=color: self.view_model.select_color(c))
                grid_layout.addWidget(btn, row, col)
                self.swatch_buttons.append(btn)
        layout.addLayout(grid_layout)

        edit_row = QHBoxLayout()
        self.preview = QLabel()
        self.preview.setFixedSize(COLOR_SWATCH_SIZE, COLOR_SWATCH_SIZE)
        edit_row.addWidget(self.preview)

        edit_row.addWidget(QLabel("#"))
        self.hex_edit = QLineEdit(self.view_model.hex_value)
        self.hex_edit.setMaxLength(7)
        self.hex_edit.editingFinished.connect(self._on_hex_edited)
        edit_row.addWidget(self.hex_edit)
        layout.addLayout(edit_row)

        opacity_row = QHBoxLayout()
        opacity_row.addWidget(QLabel("Opacity"))
        self.opacity_slider = QSlider(Qt.Horizontal)
        self.opacity_slider.setRange(0, 100)
        self.opacity_slider.setValue(int(round(self.view_model.opacity * 100)))
        self.opacity_slider.valueChanged.connect(self._on_slider_changed)
        opacity_row.addWidget(self.opacity_slider)
        layout.addLayout(opacity_row)

        custom_btn = QPushButton("Custom Color...")
        custom_btn.clicked.connect(self._open_custom_picker)
        layout.addWidget(custom_btn)

        self._update_preview(self.view_model.selected_color)

    # ========================================
    # User input -> view model
    # ========================================

    def _on_hex_edited(self):
        """Push typed hex text to the view model; restore the field if rejected"""
        try:
            accepted = self.view_model.update_from_hex(self.hex_edit.text())
        except InvalidInputError as e:
            self.hex_edit.setToolTip(str(e))
            accepted = False
        if not accepted:
            self.hex_edit.setText(self.view_model.hex_value)

    def _on_slider_changed(self, value):
        self.view_model.set_opacity(value / 100.0)

    def _open_custom_picker(self):
        """Open Qt's color dialog and convert result back to Color object"""
        try:
            initial_qcolor = self.view_model.selected_color.to_qcolor()
            picked_qcolor = QColorDialog.getColor(initial_qcolor, self, "Choose Custom Color")

            if picked_qcolor.isValid():
                self.view_model.select_color(Color.from_qcolor(picked_qcolor))
        except Exception as e:
            loggerRaise(e, "Error choosing custom color")

    # ========================================
    # View model -> widgets
    # ========================================

    def _on_color_changed(self, color):
        self._update_preview(color)

    def _on_hex_value_changed(self, hex_value):
        self.hex_edit.setText(hex_value)
        self.hex_edit.setToolTip("")

    def _on_opacity_changed(self, opacity):
        self.opacity_slider.blockSignals(True)
        self.opacity_slider.setValue(int(round(opacity * 100)))
        self.opacity_slider.blockSignals(False)

    def _update_preview(self, color):
        self.preview.setStyleSheet(f"background-color: {color.to_css()}; border-radius: 4px;")


def create_color_button(color):
    """Create a color swatch button from Color object

    Args:
        color: Color object

    Returns:
        QPushButton configured as color swatch
    """
    btn = QPushButton()
    btn.setFixedSize(COLOR_SWATCH_SIZE, COLOR_SWATCH_SIZE)
    btn.setToolTip(color.to_hex())
    # Qt boundary: convert Color to rgba() for stylesheet
    btn.setStyleSheet(f"""
        QPushButton {{
            background-color: {color.to_css()};
            border-radius: 4px;
            border: 1px solid rgba(255, 255, 255, 30);
        }}
    """)
    return btn
