"""UI components for MindFlow view models

This package contains the Qt widgets that consume the view models:
- canvas_widgets: drag-to-pan canvas feeding a PanSignalChannel
- property_sidebar_widgets: color picker panel and shape selector
"""

from .canvas_widgets.canvas_pan_mixin import CanvasPanMixin, PanCanvas
from .property_sidebar_widgets import ColorPickerPanel, ShapeSelectorButton, create_color_button

__all__ = [
    'CanvasPanMixin',
    'PanCanvas',
    'ColorPickerPanel',
    'ShapeSelectorButton',
    'create_color_button',
]
