"""UI components for the color extractor viewer."""

from ui.main_window import PaletteWindow
from ui.palette_panel import PalettePanel

__all__ = [
    "PaletteWindow",
    "PalettePanel",
]
