"""
MindFlow View Models - Pan Gesture

Idle/panning state machine for dragging the canvas. Driven either by direct
calls (begin/move/end) from the owning widget, or by the three pan signals
(PanStart, PanMove, PanEnd) delivered through a PanSignalChannel.

Signal payloads are mappings carrying the pointer under the 'location' key.
"""

import logging
import math
from collections.abc import Mapping
from enum import Enum
from numbers import Real

from PyQt5 import sip
from PyQt5.QtCore import QObject, QPoint, QPointF, pyqtSignal

from mindflow.constants import (
    PAN_START_SIGNAL, PAN_MOVE_SIGNAL, PAN_END_SIGNAL, PAN_SIGNAL_NAMES, PAN_LOCATION_KEY,
)
from mindflow.models.errors import MalformedPanPayloadError
from mindflow.models.transform import Vec2, PanState
from mindflow.utils.logger import InvalidInputPolicy, report_invalid_input


class PanPhase(Enum):
    IDLE = 'idle'
    PANNING = 'panning'


def _is_coordinate(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def coerce_point(point):
    """Convert a pointer location to Vec2.

    Accepts Vec2, QPoint/QPointF, or a 2-sequence of real numbers.

    Returns:
        Vec2, or None if point is not a usable location
    """
    if isinstance(point, Vec2):
        x, y = point.x, point.y
    elif isinstance(point, (QPoint, QPointF)):
        x, y = point.x(), point.y()
    elif isinstance(point, (tuple, list)) and len(point) == 2:
        x, y = point
    else:
        return None

    if not (_is_coordinate(x) and _is_coordinate(y)):
        return None
    return Vec2(float(x), float(y))


def location_from_payload(payload):
    """Pull the pointer location out of a pan signal payload (or None)."""
    if not isinstance(payload, Mapping):
        return None
    return coerce_point(payload.get(PAN_LOCATION_KEY))


class PanSignalChannel(QObject):
    """Explicit event channel carrying the three pan signals.

    The owning canvas emits; a PanGestureViewModel attached to the channel
    receives. Each signal carries the payload mapping (or None for end).
    """

    panStarted = pyqtSignal(object)
    panMoved = pyqtSignal(object)
    panEnded = pyqtSignal(object)

    def post(self, name, payload=None):
        """Emit a pan signal by name.

        Raises:
            KeyError: name is not one of the pan signal names
        """
        signal = {
            PAN_START_SIGNAL: self.panStarted,
            PAN_MOVE_SIGNAL: self.panMoved,
            PAN_END_SIGNAL: self.panEnded,
        }[name]
        signal.emit(payload)

    def post_start(self, location):
        self.panStarted.emit({PAN_LOCATION_KEY: location})

    def post_move(self, location):
        self.panMoved.emit({PAN_LOCATION_KEY: location})

    def post_end(self):
        self.panEnded.emit(None)


class PanGestureViewModel(QObject):
    """Pan state machine: IDLE <-> PANNING, with a cumulative offset.

    - begin(location): IDLE -> PANNING, remembers location as last_pointer
    - move(location):  PANNING -> PANNING, offset += location - last_pointer
    - end():           PANNING -> IDLE, offset is kept

    move and end are no-ops while idle. A rejected location never changes
    state; the invalid input policy decides whether it is logged or raised.

    When attached to a PanSignalChannel the gesture holds exactly one
    registration; detach() (or leaving a with-block) releases it.
    """

    panningChanged = pyqtSignal(bool)
    offsetChanged = pyqtSignal(object)  # Vec2
    pointerChanged = pyqtSignal(object)  # Vec2

    def __init__(self, channel=None, offset_limit=None, invalid_input_policy=None, parent=None):
        super().__init__(parent)
        self._logger = logging.getLogger('PanGesture')
        self.invalid_input_policy = InvalidInputPolicy.coerce(invalid_input_policy)
        if offset_limit is not None and offset_limit < 0:
            raise ValueError(f"offset_limit must be >= 0, got {offset_limit!r}")
        self.offset_limit = offset_limit

        self._is_panning = False
        self._offset = Vec2()
        self._last_pointer = Vec2()
        self._channel = None

        if channel is not None:
            self.attach(channel)

    # ========================================
    # Read-only state
    # ========================================

    @property
    def phase(self) -> PanPhase:
        return PanPhase.PANNING if self._is_panning else PanPhase.IDLE

    @property
    def is_panning(self) -> bool:
        return self._is_panning

    @property
    def offset(self) -> Vec2:
        return Vec2(self._offset.x, self._offset.y)

    @property
    def last_pointer(self) -> Vec2:
        return Vec2(self._last_pointer.x, self._last_pointer.y)

    @property
    def state(self) -> PanState:
        return PanState(is_active=self._is_panning, offset=self.offset, last_pointer=self.last_pointer)

    @property
    def channel(self):
        return self._channel

    # ========================================
    # Transitions
    # ========================================

    def begin(self, location) -> bool:
        """Start panning at location. Returns False if location was rejected."""
        point = coerce_point(location)
        if point is None:
            self._reject(PAN_START_SIGNAL, {PAN_LOCATION_KEY: location})
            return False
        return self._begin(point)

    def move(self, location) -> bool:
        """Move the pointer while panning. Returns True if the offset was updated."""
        if not self._is_panning:
            return False
        point = coerce_point(location)
        if point is None:
            self._reject(PAN_MOVE_SIGNAL, {PAN_LOCATION_KEY: location})
            return False
        return self._move(point)

    def end(self) -> bool:
        """Stop panning. Returns False if no pan was in progress."""
        if not self._is_panning:
            return False
        self._is_panning = False
        self._logger.debug("Pan ended at offset (%g, %g)", *self._offset)
        self.panningChanged.emit(False)
        return True

    def reset(self) -> None:
        """Back to the initial state: idle, zero offset, zero pointer."""
        was_panning = self._is_panning
        self._is_panning = False
        self._set_pointer(Vec2())
        self._set_offset(Vec2())
        if was_panning:
            self.panningChanged.emit(False)

    def handle_signal(self, name, payload=None) -> bool:
        """Apply a named pan signal with its payload.

        Returns:
            True if the signal caused a transition
        """
        if name == PAN_END_SIGNAL:
            return self.end()
        if name not in PAN_SIGNAL_NAMES:
            self._reject(name, payload)
            return False
        if name == PAN_MOVE_SIGNAL and not self._is_panning:
            return False

        point = location_from_payload(payload)
        if point is None:
            self._reject(name, payload)
            return False
        if name == PAN_START_SIGNAL:
            return self._begin(point)
        return self._move(point)

    # ========================================
    # Channel registration
    # ========================================

    def attach(self, channel: PanSignalChannel) -> None:
        """Receive pan signals from channel. Replaces any previous channel."""
        if channel is self._channel:
            return
        self.detach()
        channel.panStarted.connect(self._on_pan_started)
        channel.panMoved.connect(self._on_pan_moved)
        channel.panEnded.connect(self._on_pan_ended)
        self._channel = channel

    def detach(self) -> None:
        """Release the channel registration. Safe to call more than once."""
        channel, self._channel = self._channel, None
        # The channel may be gone already if its owner was torn down first
        if channel is None or sip.isdeleted(channel):
            return
        channel.panStarted.disconnect(self._on_pan_started)
        channel.panMoved.disconnect(self._on_pan_moved)
        channel.panEnded.disconnect(self._on_pan_ended)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.detach()
        return False

    def _on_pan_started(self, payload):
        self.handle_signal(PAN_START_SIGNAL, payload)

    def _on_pan_moved(self, payload):
        self.handle_signal(PAN_MOVE_SIGNAL, payload)

    def _on_pan_ended(self, payload):
        self.handle_signal(PAN_END_SIGNAL, payload)

    # ========================================
    # Internals
    # ========================================

    def _begin(self, point: Vec2) -> bool:
        was_panning = self._is_panning
        self._is_panning = True
        self._set_pointer(point)
        self._logger.debug("Pan started at (%g, %g)", point.x, point.y)
        if not was_panning:
            self.panningChanged.emit(True)
        return True

    def _move(self, point: Vec2) -> bool:
        offset = self._offset + (point - self._last_pointer)
        if self.offset_limit is not None:
            offset = offset.clamped(self.offset_limit)
        self._set_pointer(point)
        self._set_offset(offset)
        return True

    def _set_offset(self, offset: Vec2) -> None:
        if offset == self._offset:
            return
        self._offset = offset
        self.offsetChanged.emit(Vec2(offset.x, offset.y))

    def _set_pointer(self, point: Vec2) -> None:
        if point == self._last_pointer:
            return
        self._last_pointer = point
        self.pointerChanged.emit(Vec2(point.x, point.y))

    def _reject(self, name, payload) -> None:
        report_invalid_input(
            self.invalid_input_policy, self._logger,
            MalformedPanPayloadError(name, payload),
        )
