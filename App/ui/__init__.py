"""UI components for the Pixify pattern designer.

This package contains modular UI panels that can be easily rearranged
in the application layout.
"""

from ui.config_panel import ConfigPanel
from ui.console_panel import ConsoleLogHandler, ConsolePanel
from ui.image_panel import ImagePanel
from ui.main_window import PatternWindow
from ui.palette_panel import PalettePanel
from ui.pattern_view import PatternView
from ui.settings_dialog import SettingsDialog

__all__ = [
    "PatternWindow",
    "ConfigPanel",
    "ConsoleLogHandler",
    "ConsolePanel",
    "ImagePanel",
    "PalettePanel",
    "PatternView",
    "SettingsDialog",
]
