"""Pixify Pattern Designer - Main entry point."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import PatternWindow


def main():
    """Launch the Pixify pattern designer application."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)

    app.setApplicationDisplayName("Pixify Pattern Designer")
    app.setApplicationName("PixifyPatternDesigner")
    app.setOrganizationName("Pixify")

    window = PatternWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
