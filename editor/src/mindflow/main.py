import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    src_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if src_dir not in sys.path:
        sys.path.insert(0, src_dir)

from PyQt5.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QApplication, QLabel

from mindflow.components.canvas_widgets.canvas_pan_mixin import PanCanvas
from mindflow.components.property_sidebar_widgets.color_picker import ColorPickerPanel
from mindflow.components.property_sidebar_widgets.shape_selector import ShapeSelectorButton
from mindflow.viewmodels import ColorSelectionViewModel, ShapeSelectionViewModel, PanGestureViewModel
from mindflow.utils.logger import InvalidInputPolicy, configure_logging, set_main_window


class MainWindow(QMainWindow):
    """Demo window: style sidebar (color + shape) next to a pannable canvas"""

    def __init__(self, invalid_input_policy=None):
        super().__init__()
        self.setWindowTitle("MindFlow")
        self._logger = logging.getLogger('MindFlow')

        self.color_selection = ColorSelectionViewModel(invalid_input_policy=invalid_input_policy, parent=self)
        self.shape_selection = ShapeSelectionViewModel(parent=self)
        self.pan_gesture = PanGestureViewModel(invalid_input_policy=invalid_input_policy, parent=self)

        central = QWidget()
        layout = QHBoxLayout(central)

        sidebar = QVBoxLayout()
        self.color_picker = ColorPickerPanel(self.color_selection)
        self.shape_selector = ShapeSelectorButton(self.shape_selection)
        sidebar.addWidget(self.color_picker)
        sidebar.addWidget(self.shape_selector)
        sidebar.addStretch()
        layout.addLayout(sidebar)

        canvas_column = QVBoxLayout()
        self.canvas = PanCanvas(self.pan_gesture)
        self.offset_label = QLabel()
        canvas_column.addWidget(self.canvas, 1)
        canvas_column.addWidget(self.offset_label)
        layout.addLayout(canvas_column, 1)

        self.setCentralWidget(central)

        self.pan_gesture.offsetChanged.connect(self._update_status)
        self._update_status(self.pan_gesture.offset)

    def _update_status(self, offset):
        self.offset_label.setText(f"Offset: {offset.x:.0f}, {offset.y:.0f}")

    def closeEvent(self, event):
        self.pan_gesture.detach()
        super().closeEvent(event)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='MindFlow view model demo')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging.')
    parser.add_argument('--strict', action='store_true',
                        help='Raise on invalid hex text and pan payloads instead of ignoring them.')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)

    app = QApplication(sys.argv)
    window = MainWindow(InvalidInputPolicy.RAISE if args.strict else None)
    set_main_window(window)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
