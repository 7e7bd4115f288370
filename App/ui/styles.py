"""Centralized styling constants for the color extractor UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QFont


class ThemeColors:
    """Application theme colors."""

    BACKGROUND_PANEL = "#2a2a2a"
    BORDER_DEFAULT = "gray"


class Fonts:
    """Standard application fonts."""

    SWATCH_LABEL = QFont("Courier", 10)


class Sizes:
    """Standard widget sizes and constraints."""

    # Image preview
    PREVIEW_MIN_SIZE = (200, 150)
    PREVIEW_MAX_SIZE = (400, 300)

    # Palette swatches
    SWATCH_SIZE = (48, 24)

    # Buttons and controls
    BUTTON_MIN_WIDTH = 100


FONTS = Fonts
SIZES = Sizes


def panel_stylesheet() -> str:
    """Generate standard panel stylesheet with border and background.

    Returns:
        CSS stylesheet string for panel styling
    """
    return (
        f"border: 1px solid {ThemeColors.BORDER_DEFAULT}; "
        f"background-color: {ThemeColors.BACKGROUND_PANEL};"
    )


def swatch_stylesheet(hex_color: str) -> str:
    """Stylesheet for a solid color swatch."""
    return f"border: 1px solid {ThemeColors.BORDER_DEFAULT}; background-color: {hex_color};"
