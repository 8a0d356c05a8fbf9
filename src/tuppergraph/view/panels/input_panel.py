from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QPlainTextEdit, QPushButton, QVBoxLayout, QWidget,
)

if TYPE_CHECKING:
    from tuppergraph.app.state import Store


class InputPanel(QWidget):
    """Plot/Clear buttons beside the text field for 'k', with a status line below."""

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        layout = QVBoxLayout(self)
        row = QHBoxLayout()
        layout.addLayout(row)

        buttons = QVBoxLayout()
        buttons.setSpacing(5)
        self.btn_plot = QPushButton("Plot")
        self.btn_plot.setMinimumWidth(50)
        self.btn_clear = QPushButton("Clear")
        self.btn_clear.setMinimumWidth(50)
        buttons.addWidget(self.btn_plot)
        buttons.addWidget(self.btn_clear)
        buttons.addStretch(1)
        row.addLayout(buttons)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        self.text_edit.setMinimumWidth(1100)
        self.text_edit.setPlainText(self.store.state.text)
        row.addWidget(self.text_edit, 1)

        self.status = QLabel(self.store.state.error or "")
        self.status.setStyleSheet("color: #B00020;")
        layout.addWidget(self.status)

        # --- SIGNAL CONNECTIONS ---
        self.text_edit.textChanged.connect(self._on_text_edited)
        self.btn_plot.clicked.connect(self._on_plot_clicked)
        self.btn_clear.clicked.connect(self.store.clear)

        self.store.text_changed.connect(self._on_store_text_changed)
        self.store.error_changed.connect(self._on_store_error_changed)

    @Slot()
    def _on_text_edited(self) -> None:
        self.store.set_text(self.text_edit.toPlainText())

    @Slot()
    def _on_plot_clicked(self) -> None:
        self.store.plot()

    @Slot(str)
    def _on_store_text_changed(self, text: str) -> None:
        if text != self.text_edit.toPlainText():
            self.text_edit.setPlainText(text)

    @Slot(object)
    def _on_store_error_changed(self, error: str | None) -> None:
        self.status.setText(error or "")
