"""Console output panel and the logging bridge that feeds it."""

import logging

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QGroupBox, QPushButton, QTextEdit, QVBoxLayout

from ui.styles import FONTS, SIZES


class _LogSignal(QObject):
    message = pyqtSignal(str)


class ConsoleLogHandler(logging.Handler):
    """Logging handler that forwards formatted records to a ConsolePanel.

    AIDEV-NOTE: Records may come from the processing QThread. Emitting a
    signal queues them onto the GUI thread instead of touching the widget.
    """

    def __init__(self, panel: "ConsolePanel", level=logging.INFO):
        super().__init__(level)
        self.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        self._signal = _LogSignal()
        self._signal.message.connect(panel.append)

    def emit(self, record: logging.LogRecord):
        try:
            self._signal.message.emit(self.format(record))
        except RuntimeError:
            # Panel already destroyed during shutdown
            self.handleError(record)


class ConsolePanel(QGroupBox):
    """Panel for displaying pipeline log output."""

    def __init__(self, parent=None):
        super().__init__(None, parent)
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.console = QTextEdit()
        self.console.setReadOnly(True)
        # AIDEV-NOTE: Use minimum height only - let dock widget handle sizing
        self.console.setMinimumHeight(SIZES.CONSOLE_MIN_HEIGHT)
        self.console.setFont(FONTS.CONSOLE)
        layout.addWidget(self.console)

        clear_console_btn = QPushButton("Clear Console")
        clear_console_btn.clicked.connect(self.clear)
        layout.addWidget(clear_console_btn)

        self.setLayout(layout)

    def append(self, message: str):
        """Add a message to the console."""
        self.console.append(message)
        # Auto-scroll to bottom
        scrollbar = self.console.verticalScrollBar()
        if scrollbar:
            scrollbar.setValue(scrollbar.maximum())

    def clear(self):
        """Clear all console output."""
        self.console.clear()

    def install_log_handler(self, logger: logging.Logger = None) -> ConsoleLogHandler:
        """Route records from a logger (root by default) into this panel."""
        handler = ConsoleLogHandler(self)
        (logger or logging.getLogger()).addHandler(handler)
        return handler
