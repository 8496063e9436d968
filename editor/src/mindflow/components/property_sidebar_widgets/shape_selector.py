"""Shape selector: a button showing the current shape and a popover grid."""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QToolButton, QFrame


class ShapeSelectorButton(QWidget):
	"""Button + popover grid bound to a ShapeSelectionViewModel"""

	def __init__(self, view_model, parent=None):
		super().__init__(parent)
		self.view_model = view_model
		self.shape_buttons = {}

		layout = QVBoxLayout(self)
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(4)

		self.toggle_btn = QToolButton()
		self.toggle_btn.setText(view_model.selected_label)
		self.toggle_btn.setToolTip("Topic shape")
		self.toggle_btn.clicked.connect(lambda checked=False: self.view_model.toggle_popover())
		layout.addWidget(self.toggle_btn)

		# Popover grid, hidden until the view model opens it
		self.popover = QFrame()
		self.popover.setFrameShape(QFrame.StyledPanel)
		grid = QGridLayout(self.popover)
		grid.setSpacing(8)
		for row, entries in enumerate(view_model.catalog_rows()):
			for col, (shape, label) in enumerate(entries):
				btn = QToolButton()
				btn.setText(label)
				btn.setCheckable(True)
				btn.setChecked(shape is view_model.selected_shape)
				btn.clicked.connect(lambda checked=False, s=shape: self.view_model.select_shape(s))
				grid.addWidget(btn, row, col)
				self.shape_buttons[shape] = btn
		self.popover.setVisible(view_model.is_showing_popover)
		layout.addWidget(self.popover)

		view_model.shapeChanged.connect(self._on_shape_changed)
		view_model.popoverChanged.connect(self.popover.setVisible)

	def _on_shape_changed(self, shape):
		"""Update the button label and the checked grid entry"""
		self.toggle_btn.setText(self.view_model.label_for(shape))
		for kind, btn in self.shape_buttons.items():
			btn.setChecked(kind is shape)
