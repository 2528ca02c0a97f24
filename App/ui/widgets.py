"""Shared builders for the pattern setting controls.

Import panel and settings dialog both edit cells across, color count and
extraction method; building them here keeps ranges and labels in one place.
"""

from typing import Optional, Tuple

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QSlider,
    QSpinBox,
    QWidget,
)

from models import PALETTE_METHODS

# AIDEV-NOTE: Keys double as combo item data; None means no color reduction
METHOD_LABELS = {
    "median_cut": "Median Cut (Default)",
    "octree": "Octree (Fastest)",
    "kmeans": "K-Means (Best quality)",
    None: "None (match every pixel)",
}


class WidgetFactory:
    """Builders for the recurring pattern setting widgets."""

    @staticmethod
    def create_int_spinbox(
        minimum: int,
        maximum: int,
        value: int,
        suffix: str = "",
        tooltip: str = "",
    ) -> QSpinBox:
        """Spin box for a bounded count such as cells across or colors."""
        spinbox = QSpinBox()
        spinbox.setRange(minimum, maximum)
        spinbox.setValue(value)
        if suffix:
            spinbox.setSuffix(suffix)
        if tooltip:
            spinbox.setToolTip(tooltip)
        return spinbox

    @staticmethod
    def create_slider_with_label(
        minimum: int,
        maximum: int,
        value: int,
        label_width: int = 40,
        tick_interval: Optional[int] = None,
        tooltip: str = "",
    ) -> Tuple[QSlider, QLabel]:
        """Horizontal slider paired with a label showing its current value.

        Returns:
            Tuple of (slider, label)
        """
        slider = QSlider(Qt.Orientation.Horizontal)
        slider.setRange(minimum, maximum)
        slider.setValue(value)
        if tooltip:
            slider.setToolTip(tooltip)
        if tick_interval:
            slider.setTickPosition(QSlider.TickPosition.TicksBelow)
            slider.setTickInterval(tick_interval)

        value_label = QLabel(str(value))
        value_label.setMinimumWidth(label_width)
        slider.valueChanged.connect(lambda v: value_label.setText(str(v)))
        return slider, value_label

    @staticmethod
    def create_method_combo(
        current: Optional[str], include_none: bool = True
    ) -> QComboBox:
        """Combo box of palette extraction methods; item data is the method."""
        combo = QComboBox()
        methods = list(PALETTE_METHODS) + ([None] if include_none else [])
        for method in methods:
            combo.addItem(METHOD_LABELS[method], method)
        combo.setCurrentIndex(max(combo.findData(current), 0))
        return combo

    @staticmethod
    def create_labeled_row(label_text: str, widget: QWidget) -> QHBoxLayout:
        row = QHBoxLayout()
        row.addWidget(QLabel(label_text))
        row.addWidget(widget)
        return row
