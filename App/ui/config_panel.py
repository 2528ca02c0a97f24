"""Pattern defaults panel."""

from PyQt6.QtWidgets import (
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from models import (
    DEFAULT_CELLS_IN_WIDTH,
    DEFAULT_COLOR_COUNT,
    MAX_COLOR_COUNT,
    MIN_COLOR_COUNT,
    PATTERNS_DIR,
    AppConfig,
)
from ui.widgets import WidgetFactory

# AIDEV-NOTE: Upper bound only for the spin box; the real limit is the image width
MAX_CELLS_IN_WIDTH = 1000


class ConfigPanel(QGroupBox):
    """Panel for default pattern settings and the save location."""

    def __init__(self, app_config: AppConfig, parent=None):
        super().__init__("Pattern Defaults", parent)
        self.app_config = app_config
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        main_layout = QVBoxLayout()

        # --- Pattern Group ---
        pattern_group = QGroupBox("New Patterns")
        pattern_layout = QFormLayout()
        self.cells_input = WidgetFactory.create_int_spinbox(
            1, MAX_CELLS_IN_WIDTH, self.app_config.cells_in_width, " cells",
            tooltip="Number of stitches across the pattern",
        )
        pattern_layout.addRow("Width:", self.cells_input)

        self.colors_input = WidgetFactory.create_int_spinbox(
            MIN_COLOR_COUNT, MAX_COLOR_COUNT, self.app_config.color_count,
            tooltip="Maximum number of thread colors",
        )
        pattern_layout.addRow("Colors:", self.colors_input)

        self.method_combo = WidgetFactory.create_method_combo(
            self.app_config.palette_method, include_none=False
        )
        pattern_layout.addRow("Method:", self.method_combo)

        pattern_group.setLayout(pattern_layout)
        main_layout.addWidget(pattern_group)

        # --- Storage Group ---
        storage_group = QGroupBox("Saved Patterns")
        storage_layout = QHBoxLayout()
        self.patterns_dir_input = QLineEdit(self.app_config.patterns_dir)
        storage_layout.addWidget(self.patterns_dir_input, stretch=1)
        browse_btn = QPushButton("Browse...")
        browse_btn.clicked.connect(self._on_browse_clicked)
        storage_layout.addWidget(browse_btn)
        storage_group.setLayout(storage_layout)
        main_layout.addWidget(storage_group)

        # --- Reset Button ---
        self.reset_btn = QPushButton("↺ Reset to Defaults")
        self.reset_btn.setToolTip(
            f"Reset to {DEFAULT_CELLS_IN_WIDTH} cells, {DEFAULT_COLOR_COUNT} colors"
        )
        self.reset_btn.clicked.connect(self.reset)
        main_layout.addWidget(self.reset_btn)

        main_layout.addStretch()
        self.setLayout(main_layout)

    def _on_browse_clicked(self):
        directory = QFileDialog.getExistingDirectory(
            self, "Choose Pattern Folder", self.patterns_dir_input.text()
        )
        if directory:
            self.patterns_dir_input.setText(directory)

    def get_values(self) -> AppConfig:
        """Get input values as AppConfig."""
        return AppConfig(
            cells_in_width=self.cells_input.value(),
            color_count=self.colors_input.value(),
            palette_method=self.method_combo.currentData(),
            patterns_dir=self.patterns_dir_input.text().strip() or str(PATTERNS_DIR),
        )

    def set_values(self, config: AppConfig):
        """Set input values."""
        self.cells_input.setValue(config.cells_in_width)
        self.colors_input.setValue(config.color_count)
        self.method_combo.setCurrentIndex(
            max(self.method_combo.findData(config.palette_method), 0)
        )
        self.patterns_dir_input.setText(config.patterns_dir)

    def reset(self):
        self.set_values(AppConfig())
