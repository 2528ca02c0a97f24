"""Main application window for pattern design."""

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QDockWidget,
    QFileDialog,
    QInputDialog,
    QMainWindow,
    QMessageBox,
    QToolBar,
    QWidget,
)

from config_manager import ConfigManager
from embroidery import PatternProcessor, load_dmc_catalog
from errors import PatternError
from models import Pattern, ThreadColor
from pattern_store import PatternStore
from ui.console_panel import ConsolePanel
from ui.image_panel import ImagePanel
from ui.palette_panel import PalettePanel
from ui.pattern_view import PatternView
from ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class PatternWindow(QMainWindow):
    """Main application window for turning images into patterns."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Pixify Pattern Designer v0.1.0")
        self.setMinimumSize(1000, 700)

        # Application state
        self.config_manager = ConfigManager()
        self.app_config = self.config_manager.load()
        self.catalog = load_dmc_catalog()
        self.processor = PatternProcessor(self.catalog, self.app_config)
        self.pattern_store = PatternStore(self.app_config.patterns_dir)
        self.pattern: Optional[Pattern] = None

        # UI component references (created in _setup_ui) - type hints for static analysis
        self.image_panel: ImagePanel
        self.palette_panel: PalettePanel
        self.console_panel: ConsolePanel
        self.pattern_view: PatternView

        self._setup_ui()
        self._connect_signals()
        self._update_actions()

    def _setup_ui(self):
        """Initialize the user interface."""
        self._create_actions()
        self._create_menu_bar()
        self._create_toolbar()

        self.pattern_view = PatternView(self.catalog)
        self.setCentralWidget(self.pattern_view)

        self._create_dock_widgets()

    def _create_actions(self):
        self.open_image_action = QAction("Open Image...", self)
        self.open_image_action.setShortcut(QKeySequence.StandardKey.Open)

        self.open_pattern_action = QAction("Open Saved Pattern...", self)

        self.save_action = QAction("Save Pattern...", self)
        self.save_action.setShortcut(QKeySequence.StandardKey.Save)

        self.export_action = QAction("Export PNG...", self)
        self.export_action.setShortcut(QKeySequence("Ctrl+E"))

        self.settings_action = QAction("⚙️ Settings", self)
        self.settings_action.setToolTip("Open default pattern settings")

        self.grid_action = QAction("Show Grid", self)
        self.grid_action.setCheckable(True)
        self.grid_action.setChecked(True)

        self.quit_action = QAction("Quit", self)
        self.quit_action.setShortcut(QKeySequence.StandardKey.Quit)

    def _create_menu_bar(self):
        """Create the File and View menus."""
        menubar = self.menuBar()
        if menubar is None:
            return

        file_menu = menubar.addMenu("&File")
        if file_menu is not None:
            file_menu.addAction(self.open_image_action)
            file_menu.addAction(self.open_pattern_action)
            file_menu.addSeparator()
            file_menu.addAction(self.save_action)
            file_menu.addAction(self.export_action)
            file_menu.addSeparator()
            file_menu.addAction(self.settings_action)
            file_menu.addSeparator()
            file_menu.addAction(self.quit_action)

        self.view_menu = menubar.addMenu("&View")
        if self.view_menu is not None:
            self.view_menu.addAction(self.grid_action)
            self.view_menu.addSeparator()

    def _create_toolbar(self):
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        toolbar.addAction(self.settings_action)
        toolbar.addSeparator()
        toolbar.addAction(self.save_action)
        toolbar.addAction(self.export_action)

    def _create_dock_widgets(self):
        """Create the import, threads and console panels as dockable widgets."""
        self.image_panel = ImagePanel(self.processor, self.app_config)
        self.palette_panel = PalettePanel(self.catalog)
        self.console_panel = ConsolePanel()

        dock_panels = [
            ("Import", self.image_panel, Qt.DockWidgetArea.LeftDockWidgetArea),
            ("Threads", self.palette_panel, Qt.DockWidgetArea.RightDockWidgetArea),
            ("Console", self.console_panel, Qt.DockWidgetArea.BottomDockWidgetArea),
        ]

        self.docks = {}
        for name, panel, area in dock_panels:
            dock = self._create_dock_widget(name, panel, area)
            self.docks[name] = dock
            action = dock.toggleViewAction()
            if action and self.view_menu is not None:
                action.setText(f"Show {name}")
                self.view_menu.addAction(action)

        # AIDEV-NOTE: Engine modules log through the root logger
        self.log_handler = self.console_panel.install_log_handler()

    def _create_dock_widget(
        self, title: str, widget: QWidget, area: Qt.DockWidgetArea
    ) -> QDockWidget:
        """Create a dockable widget with standard settings."""
        dock = QDockWidget(title, self)
        dock.setObjectName(f"{title}Dock")
        dock.setWidget(widget)
        dock.setAllowedAreas(
            Qt.DockWidgetArea.LeftDockWidgetArea
            | Qt.DockWidgetArea.RightDockWidgetArea
            | Qt.DockWidgetArea.BottomDockWidgetArea
        )
        self.addDockWidget(area, dock)
        return dock

    def _connect_signals(self):
        """Connect all UI signals to handlers."""
        self.open_image_action.triggered.connect(self.image_panel.browse_for_image)
        self.open_pattern_action.triggered.connect(self._open_saved_pattern)
        self.save_action.triggered.connect(self._save_pattern)
        self.export_action.triggered.connect(self._export_png)
        self.settings_action.triggered.connect(self._open_settings_dialog)
        self.grid_action.toggled.connect(self.pattern_view.set_show_grid)
        self.quit_action.triggered.connect(self.close)

        self.image_panel.processing_complete.connect(self._on_pattern_created)
        self.image_panel.processing_failed.connect(self._on_processing_failed)
        self.pattern_view.cell_recolor_requested.connect(self._recolor_cell)
        self.palette_panel.thread_replace_requested.connect(self._replace_thread)

    # === Pattern State ===

    def set_pattern(self, pattern: Optional[Pattern]):
        """Show a pattern in the canvas and thread panel."""
        self.pattern = pattern
        self.pattern_view.set_pattern(pattern)
        self.palette_panel.set_manifest(pattern.manifest if pattern else None)
        self._update_actions()

    def _update_actions(self):
        has_pattern = self.pattern is not None
        self.save_action.setEnabled(has_pattern)
        self.export_action.setEnabled(has_pattern)

    def _on_pattern_created(self, pattern: Pattern):
        self.set_pattern(pattern)
        self.console_panel.append(
            f"🧵 Pattern created: {pattern.grid.columns}x{pattern.grid.rows} "
            f"stitches, {len(pattern.manifest)} threads"
        )

    def _on_processing_failed(self, message: str):
        self.console_panel.append(f"❌ Error: {message}")

    # === Editing ===

    def _recolor_cell(self, row: int, column: int, thread: ThreadColor):
        if self.pattern is None:
            return
        self.set_pattern(self.processor.recolor_cell(self.pattern, row, column, thread))

    def _replace_thread(self, old: ThreadColor, new: ThreadColor):
        if self.pattern is None:
            return
        self.set_pattern(self.processor.replace_thread(self.pattern, old, new))
        logger.info("Replaced DMC %s with DMC %s", old.name, new.name)

    # === Files ===

    def _export_png(self):
        """Write the rendered pattern as PNG."""
        if self.pattern is None:
            return
        name = Path(self.pattern.filename).with_suffix(".png").name
        default = str(Path(self.app_config.patterns_dir) / name)
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Export Pattern", default, "PNG Images (*.png)"
        )
        if not file_path:
            return

        path = Path(file_path)
        try:
            self.processor.save_export(self.pattern, path.parent, path.name)
        except OSError as e:
            QMessageBox.warning(self, "Export Error", f"Could not export pattern:\n{e}")
            return
        self.console_panel.append(f"✓ Exported {path}")

    def _save_pattern(self):
        if self.pattern is None:
            return
        name, ok = QInputDialog.getText(
            self, "Save Pattern", "Pattern name:", text=Path(self.pattern.filename).stem
        )
        if not ok:
            return
        try:
            self.pattern_store.save(name, self.pattern)
        except PatternError as e:
            QMessageBox.warning(self, "Save Error", str(e))
            return
        except OSError as e:
            QMessageBox.warning(self, "Save Error", f"Could not save pattern:\n{e}")
            return
        self.console_panel.append(f"✓ Saved pattern '{name.strip()}'")

    def _open_saved_pattern(self):
        names = self.pattern_store.names()
        if not names:
            QMessageBox.information(
                self,
                "No Saved Patterns",
                f"No patterns saved in {self.pattern_store.directory}",
            )
            return
        name, ok = QInputDialog.getItem(self, "Open Pattern", "Pattern:", names, 0, False)
        if not ok:
            return
        try:
            pattern = self.pattern_store.load(name, self.catalog)
        except (KeyError, ValueError, OSError) as e:
            QMessageBox.warning(self, "Open Error", f"Could not open pattern:\n{e}")
            return
        self.set_pattern(pattern)
        self.console_panel.append(f"📂 Opened pattern '{name}'")

    # === Settings Dialog ===

    def _open_settings_dialog(self):
        """Open the settings dialog for pattern defaults."""
        dialog = SettingsDialog(self.app_config, self)
        dialog.set_values(self.app_config)

        if not dialog.exec():
            return

        self.app_config = dialog.get_values()
        self.processor.app_config = self.app_config
        self.pattern_store = PatternStore(self.app_config.patterns_dir)
        self.image_panel.update_app_config(self.app_config)

        # Save to file for persistence
        success, error = self.config_manager.save(self.app_config)
        if not success:
            self.console_panel.append(f"❌ Error saving config: {error}")
            QMessageBox.warning(
                self,
                "Save Error",
                f"Could not save configuration:\n{error}",
            )
        else:
            self.console_panel.append("✓ Configuration saved")

    # === Application Lifecycle ===

    def closeEvent(self, a0):
        """Detach the console log handler when the window closes."""
        logging.getLogger().removeHandler(self.log_handler)
        thread = self.image_panel.processing_thread
        if thread is not None and thread.isRunning():
            thread.wait(5000)
        if a0:
            a0.accept()
