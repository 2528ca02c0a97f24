"""Thread palette panel listing the pattern's manifest."""

from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QGroupBox,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
)

from embroidery.catalog import ThreadCatalog
from models import PaletteEntry, PaletteManifest
from ui.pattern_view import pick_catalog_thread
from ui.styles import FONTS, SIZES, swatch_color

COLUMNS = ("ID", "Color", "DMC", "Stitches", "Length")


class PalettePanel(QGroupBox):
    """Panel for the threads used by the current pattern."""

    # old thread, new thread
    thread_replace_requested = pyqtSignal(object, object)

    def __init__(self, catalog: ThreadCatalog, parent=None):
        super().__init__("Threads", parent)
        self.catalog = catalog
        self.entries: "list[PaletteEntry]" = []
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.table = QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        vertical = self.table.verticalHeader()
        if vertical:
            vertical.setVisible(False)
        header = self.table.horizontalHeader()
        if header:
            header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
            header.setStretchLastSection(True)
        self.table.itemSelectionChanged.connect(self._on_selection_changed)
        layout.addWidget(self.table)

        self.summary_label = QLabel("")
        layout.addWidget(self.summary_label)

        self.replace_btn = QPushButton("Replace Thread...")
        self.replace_btn.setToolTip("Swap the selected thread everywhere in the pattern")
        self.replace_btn.setEnabled(False)
        self.replace_btn.clicked.connect(self._on_replace_clicked)
        layout.addWidget(self.replace_btn)

        self.setLayout(layout)

    def set_manifest(self, manifest: Optional[PaletteManifest]):
        """Show a manifest, or clear the table for None."""
        self.entries = list(manifest) if manifest is not None else []
        self.table.setRowCount(len(self.entries))

        for row, entry in enumerate(self.entries):
            identifier = QTableWidgetItem(entry.identifier)
            identifier.setFont(FONTS.IDENTIFIER)
            self.table.setItem(row, 0, identifier)

            swatch = QPixmap(SIZES.SWATCH_SIZE, SIZES.SWATCH_SIZE)
            swatch.fill(swatch_color(entry.color.rgb))
            swatch_item = QTableWidgetItem()
            swatch_item.setData(Qt.ItemDataRole.DecorationRole, swatch)
            swatch_item.setToolTip("#{:02X}{:02X}{:02X}".format(*entry.color.rgb))
            self.table.setItem(row, 1, swatch_item)

            self.table.setItem(row, 2, QTableWidgetItem(entry.color.name))
            self.table.setItem(row, 3, self._number_item(str(entry.usage_count)))
            self.table.setItem(
                row, 4, self._number_item(f"{entry.thread_length:.1f} cm")
            )

        if manifest is None:
            self.summary_label.setText("")
        else:
            self.summary_label.setText(
                f"{len(manifest)} threads, {manifest.total_usage} stitches"
            )
        self.replace_btn.setEnabled(False)

    @staticmethod
    def _number_item(text: str) -> QTableWidgetItem:
        item = QTableWidgetItem(text)
        item.setTextAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        return item

    def selected_entry(self) -> Optional[PaletteEntry]:
        row = self.table.currentRow()
        if 0 <= row < len(self.entries):
            return self.entries[row]
        return None

    def _on_selection_changed(self):
        self.replace_btn.setEnabled(self.selected_entry() is not None)

    def _on_replace_clicked(self):
        entry = self.selected_entry()
        if entry is None:
            return
        thread = pick_catalog_thread(
            self, self.catalog, f"Replace {entry.identifier} (DMC {entry.color.name})"
        )
        if thread is not None and thread != entry.color:
            self.thread_replace_requested.emit(entry.color, thread)
