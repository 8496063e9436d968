"""
Shared fixtures for MindFlow view model tests.

Provides fresh view model instances and a pan signal channel.
"""
import sys
import os
import pytest

# Run Qt headless when no display platform is configured
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))


@pytest.fixture
def color_vm():
    """Color selection starting at black, opacity 1.0"""
    from mindflow.viewmodels.color_selection import ColorSelectionViewModel
    return ColorSelectionViewModel()


@pytest.fixture
def shape_vm():
    """Shape selection starting at rectangle"""
    from mindflow.viewmodels.shape_selection import ShapeSelectionViewModel
    return ShapeSelectionViewModel()


@pytest.fixture
def pan_channel():
    """Unattached pan signal channel"""
    from mindflow.viewmodels.pan_gesture import PanSignalChannel
    return PanSignalChannel()


@pytest.fixture
def pan_vm(pan_channel):
    """Idle pan gesture attached to pan_channel"""
    from mindflow.viewmodels.pan_gesture import PanGestureViewModel
    vm = PanGestureViewModel(channel=pan_channel)
    yield vm
    vm.detach()
