"""Settings dialog for pattern defaults."""

from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QVBoxLayout,
)

from models import AppConfig
from ui.config_panel import ConfigPanel


class SettingsDialog(QDialog):
    """Dialog window for editing the defaults used for new patterns."""

    def __init__(self, app_config: AppConfig, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Pixify Settings")
        self.setMinimumWidth(480)
        self.app_config = app_config
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the dialog UI."""
        layout = QVBoxLayout()

        self.config_panel = ConfigPanel(self.app_config)
        layout.addWidget(self.config_panel)

        # Dialog buttons (OK/Cancel)
        button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok
            | QDialogButtonBox.StandardButton.Cancel
        )
        button_box.accepted.connect(self.accept)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)

        self.setLayout(layout)

    def get_values(self) -> AppConfig:
        """Get configuration values from the panel."""
        return self.config_panel.get_values()

    def set_values(self, config: AppConfig):
        """Set configuration values in the panel."""
        self.config_panel.set_values(config)
