"""Mixin turning mouse drags on a canvas into pan signals.

The canvas does not track pan state itself: it posts PanStart/PanMove/PanEnd
to its PanSignalChannel and reads the offset back from the attached
PanGestureViewModel.
"""

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QWidget

from mindflow.viewmodels.pan_gesture import PanGestureViewModel, PanSignalChannel


class CanvasPanMixin:
	"""Mixin providing drag-to-pan for canvas widgets."""

	# Expected state variables (initialized in main class):
	# - pan_channel: PanSignalChannel
	# - pan_button: Qt.MouseButton that starts a pan

	def _handle_pan_mouse_press(self, event):
		"""Handle mouse press for panning. Returns True if event was handled."""
		if event.button() == self.pan_button:
			self.pan_channel.post_start(event.localPos())
			self.setCursor(Qt.ClosedHandCursor)
			return True
		return False

	def _handle_pan_mouse_move(self, event):
		"""Handle mouse move for panning. Returns True if event was handled."""
		if event.buttons() & self.pan_button:
			self.pan_channel.post_move(event.localPos())
			return True
		return False

	def _handle_pan_mouse_release(self, event):
		"""Handle mouse release for panning. Returns True if event was handled."""
		if event.button() == self.pan_button:
			self.pan_channel.post_end()
			self.setCursor(Qt.OpenHandCursor)
			return True
		return False


class PanCanvas(CanvasPanMixin, QWidget):
	"""Minimal canvas owning a pan channel and the gesture attached to it."""

	def __init__(self, pan_gesture=None, parent=None, pan_button=Qt.LeftButton):
		super().__init__(parent)
		self.pan_button = pan_button
		self.pan_channel = PanSignalChannel(self)
		self.pan_gesture = pan_gesture if pan_gesture is not None else PanGestureViewModel(parent=self)
		self.pan_gesture.attach(self.pan_channel)
		self.pan_gesture.offsetChanged.connect(lambda offset: self.update())
		self.setCursor(Qt.OpenHandCursor)
		self.setMinimumSize(200, 150)

	def mousePressEvent(self, event):
		if not self._handle_pan_mouse_press(event):
			super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		if not self._handle_pan_mouse_move(event):
			super().mouseMoveEvent(event)

	def mouseReleaseEvent(self, event):
		if not self._handle_pan_mouse_release(event):
			super().mouseReleaseEvent(event)

	def closeEvent(self, event):
		self.pan_gesture.detach()
		super().closeEvent(event)
