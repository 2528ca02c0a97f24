"""Image import and processing panel for the photo-to-pattern workflow."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import Qt, QThread, pyqtSignal
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import (
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from embroidery import PatternProcessor
from errors import PatternError
from models import MAX_COLOR_COUNT, MIN_COLOR_COUNT, AppConfig, Pattern
from ui.config_panel import MAX_CELLS_IN_WIDTH
from ui.styles import SIZES, panel_stylesheet, status_stylesheet
from ui.widgets import WidgetFactory

logger = logging.getLogger(__name__)

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp *.tif *.tiff)"


class ProcessingThread(QThread):
    """Background thread for pattern processing to avoid blocking UI."""

    finished = pyqtSignal(object)  # Pattern
    error = pyqtSignal(str)  # Error message
    progress = pyqtSignal(int)  # Progress percentage

    def __init__(
        self,
        file_path: str,
        processor: PatternProcessor,
        cells_in_width: int,
        color_count: int,
        palette_method: str | None,
    ):
        super().__init__()
        self.file_path = file_path
        self.processor = processor
        self.cells_in_width = cells_in_width
        self.color_count = color_count
        self.palette_method = palette_method

    def run(self):
        """Execute pattern processing in background."""
        try:
            self.progress.emit(10)
            image = self.processor.load_image(self.file_path)

            self.progress.emit(20)
            config = self.processor.build_config(
                image,
                self.cells_in_width,
                self.color_count,
                self.palette_method,
                reduce_colors=self.palette_method is not None,
            )

            self.progress.emit(30)
            result = self.processor.process_image(
                image, config, Path(self.file_path).name
            )

            self.progress.emit(100)
            self.finished.emit(result)

        except PatternError as e:
            self.error.emit(str(e))
        except Exception as e:
            # AIDEV-NOTE: Last stop before the thread exits; report to the UI
            logger.exception("Pattern processing failed")
            self.error.emit(f"Unexpected error: {e}")


class ImagePanel(QGroupBox):
    """Panel for image import and pattern settings."""

    processing_complete = pyqtSignal(object)  # Pattern
    processing_failed = pyqtSignal(str)  # Error message

    def __init__(
        self,
        processor: PatternProcessor,
        app_config: AppConfig,
        parent: QWidget | None = None,
    ):
        super().__init__("Image Import", parent)
        self.processor = processor
        self.app_config = app_config
        self.current_image_path: str | None = None
        self.processing_thread: ProcessingThread | None = None

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        layout = QVBoxLayout()
        self._create_source_area(layout)
        self._create_pattern_controls(layout)
        self._create_run_area(layout)
        layout.addStretch()
        self.setLayout(layout)

    def _create_source_area(self, parent_layout: QVBoxLayout):
        """Chosen file name, picker button and thumbnail."""
        row = QHBoxLayout()
        self.file_path_label = QLabel("No image chosen")
        self.file_path_label.setWordWrap(True)
        row.addWidget(self.file_path_label, stretch=1)

        self.browse_btn = QPushButton("Choose Image...")
        self.browse_btn.setToolTip("Photo or artwork to turn into a pattern")
        row.addWidget(self.browse_btn)
        parent_layout.addLayout(row)

        self.preview_label = QLabel("No image")
        self.preview_label.setMinimumSize(*SIZES.PREVIEW_MIN_SIZE)
        self.preview_label.setMaximumSize(*SIZES.PREVIEW_MAX_SIZE)
        self.preview_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.preview_label.setStyleSheet(panel_stylesheet())
        parent_layout.addWidget(self.preview_label)

    def _create_pattern_controls(self, parent_layout: QVBoxLayout):
        """Cells across, thread count and extraction method."""
        pattern_group = QGroupBox("Pattern")
        pattern_layout = QVBoxLayout()

        self.cells_spin = WidgetFactory.create_int_spinbox(
            1,
            MAX_CELLS_IN_WIDTH,
            self.app_config.cells_in_width,
            " cells",
            tooltip="Stitches across; must not exceed the image width in pixels",
        )
        pattern_layout.addLayout(
            WidgetFactory.create_labeled_row("Width:", self.cells_spin)
        )

        self.num_colors_slider, self.num_colors_label = (
            WidgetFactory.create_slider_with_label(
                MIN_COLOR_COUNT,
                MAX_COLOR_COUNT,
                self.app_config.color_count,
                label_width=SIZES.LABEL_MIN_WIDTH,
                tick_interval=20,
                tooltip="Maximum number of thread colors",
            )
        )
        threads_row = WidgetFactory.create_labeled_row(
            "Threads:", self.num_colors_slider
        )
        threads_row.addWidget(self.num_colors_label)
        pattern_layout.addLayout(threads_row)

        self.method_combo = WidgetFactory.create_method_combo(
            self.app_config.palette_method
        )
        self.method_combo.currentIndexChanged.connect(self._on_method_changed)
        pattern_layout.addLayout(
            WidgetFactory.create_labeled_row("Method:", self.method_combo)
        )

        pattern_group.setLayout(pattern_layout)
        parent_layout.addWidget(pattern_group)
        self._on_method_changed()

    def _create_run_area(self, parent_layout: QVBoxLayout):
        """Create button, progress bar and status line."""
        self.process_btn = QPushButton("Create Pattern")
        self.process_btn.setEnabled(False)
        self.process_btn.setMinimumWidth(SIZES.BUTTON_MIN_WIDTH)
        self.process_btn.setToolTip("Match the image to DMC threads cell by cell")
        parent_layout.addWidget(self.process_btn)

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        parent_layout.addWidget(self.progress_bar)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        parent_layout.addWidget(self.status_label)

    def _connect_signals(self):
        self.browse_btn.clicked.connect(self.browse_for_image)
        self.process_btn.clicked.connect(self._on_process_clicked)

    # === Event Handlers ===

    def browse_for_image(self):
        """Ask for an image file and load it."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Choose Image", "", IMAGE_FILTER
        )
        if file_path:
            self.load_image(file_path)

    def load_image(self, file_path: str):
        """Remember the image and show its thumbnail."""
        self.current_image_path = file_path
        self.file_path_label.setText(Path(file_path).name)

        pixmap = QPixmap(file_path)
        if pixmap.isNull():
            # AIDEV-NOTE: Qt may lack a plugin Pillow has; let processing decide
            self.preview_label.setText("No preview available")
        else:
            self.preview_label.setPixmap(
                pixmap.scaled(
                    *SIZES.PREVIEW_MAX_SIZE,
                    Qt.AspectRatioMode.KeepAspectRatio,
                    Qt.TransformationMode.SmoothTransformation,
                )
            )

        self.process_btn.setEnabled(True)
        self._set_status("Ready to create pattern.")

    def _on_method_changed(self):
        # Thread count only applies when colors are reduced
        reduce_colors = self.method_combo.currentData() is not None
        self.num_colors_slider.setEnabled(reduce_colors)
        self.num_colors_label.setEnabled(reduce_colors)

    def _on_process_clicked(self):
        if not self.current_image_path:
            return

        self._set_busy(True)
        self._set_status("Creating pattern...")

        self.processing_thread = ProcessingThread(
            self.current_image_path,
            self.processor,
            self.cells_spin.value(),
            self.num_colors_slider.value(),
            self.method_combo.currentData(),
        )
        self.processing_thread.finished.connect(self._on_processing_finished)
        self.processing_thread.error.connect(self._on_processing_error)
        self.processing_thread.progress.connect(self.progress_bar.setValue)
        self.processing_thread.start()

    def _on_processing_finished(self, result: Pattern):
        self._set_busy(False)
        self._set_status(
            f"{result.grid.columns}x{result.grid.rows} stitches, "
            f"{len(result.manifest)} threads"
        )
        self.processing_complete.emit(result)

    def _on_processing_error(self, error_msg: str):
        self._set_busy(False)
        message = " ".join(error_msg.split())
        self._set_status(f"Error: {message}", ok=False)
        self.processing_failed.emit(message)

    def _set_busy(self, busy: bool):
        self.process_btn.setEnabled(not busy)
        self.browse_btn.setEnabled(not busy)
        self.progress_bar.setValue(0)
        self.progress_bar.setVisible(busy)

    def _set_status(self, text: str, ok: bool = True):
        self.status_label.setText(text)
        self.status_label.setStyleSheet(status_stylesheet(ok))

    # === Public Methods ===

    def update_app_config(self, config: AppConfig):
        """Apply new defaults to the controls."""
        self.app_config = config
        self.cells_spin.setValue(config.cells_in_width)
        self.num_colors_slider.setValue(config.color_count)
        self.method_combo.setCurrentIndex(
            max(self.method_combo.findData(config.palette_method), 0)
        )
