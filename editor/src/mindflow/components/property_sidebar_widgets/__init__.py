"""
MindFlow View Models - Property Sidebar Widget Components

Style editors shown in the sidebar: color picker panel and shape selector.
"""

from .color_picker import ColorPickerPanel, create_color_button
from .shape_selector import ShapeSelectorButton

__all__ = ['ColorPickerPanel', 'create_color_button', 'ShapeSelectorButton']
