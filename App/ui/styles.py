"""Centralized styling constants for the Pixify UI.

Canvas grid colors, swatch sizes and status colors live here so the pattern
view, palette table and import panel agree on them.
"""

from PyQt6.QtGui import QColor, QFont


class ThemeColors:
    """Application theme colors for the pattern canvas and panels."""

    # Background colors
    BACKGROUND_DARK = QColor(20, 20, 20)
    BACKGROUND_PANEL = "#2a2a2a"

    # UI borders and frames
    BORDER_DEFAULT = "gray"

    # Pattern canvas
    GRID_LINE = QColor(0, 0, 0, 60)
    GRID_LINE_MAJOR = QColor(0, 0, 0, 140)  # every 10 stitches
    HOVER_OUTLINE = QColor(255, 255, 255)

    # Status label
    ERROR = "red"
    SUCCESS = "green"


class Fonts:
    """Standard application fonts."""

    CONSOLE = QFont("Courier", 9)
    IDENTIFIER = QFont("Arial", 10, QFont.Weight.Bold)


class Sizes:
    """Standard widget sizes and constraints."""

    # Console panel
    CONSOLE_MIN_HEIGHT = 100

    # Image preview
    PREVIEW_MIN_SIZE = (200, 150)
    PREVIEW_MAX_SIZE = (400, 300)

    # Pattern canvas
    CANVAS_MIN_SIZE = (400, 300)
    CANVAS_PADDING = 20  # pixels
    MAJOR_GRID_EVERY = 10  # cells

    # Palette table
    SWATCH_SIZE = 18

    # Buttons and controls
    BUTTON_MIN_WIDTH = 100
    LABEL_MIN_WIDTH = 40


COLORS = ThemeColors
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


def status_stylesheet(ok: bool) -> str:
    """Text color for the processing status label."""
    return f"color: {ThemeColors.SUCCESS if ok else ThemeColors.ERROR};"


def swatch_color(rgb: "tuple[int, int, int]") -> QColor:
    return QColor(*rgb)
