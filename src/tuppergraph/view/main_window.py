"""
Main Application Window
=======================
The single window: input panel on top, pixel grid below.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the Presets menu and the store signals to the widgets.
"""
import logging
from functools import partial

from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget
from PySide6.QtGui import QAction

from tuppergraph.app.state import Store
from tuppergraph.config import PRESETS, VISIBLE_APP_NAME
from tuppergraph.view.panels.input_panel import InputPanel
from tuppergraph.view.widgets.grid_view import GridView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.store = store

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1200, 600)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(20, 20, 20, 20)

        self.input_panel = InputPanel(self.store, self)
        main_layout.addWidget(self.input_panel, 0)

        self.grid_view = GridView(self)
        main_layout.addWidget(self.grid_view, 1)

        # --- SIGNAL CONNECTIONS ---
        self.store.grid_changed.connect(self.grid_view.set_grid)

        self._create_menus()

        # Initial Render
        self.grid_view.set_grid(self.store.state.grid)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()
        presets_menu = menu_bar.addMenu("&Presets")
        self.preset_actions: dict[str, QAction] = {}
        for name, k in PRESETS.items():
            act = QAction(name, self)
            act.triggered.connect(partial(self.on_preset, name, k))
            self.preset_actions[name] = act
            presets_menu.addAction(act)

    def on_preset(self, name: str, k: str, checked: bool = False) -> None:
        """Load a preset into the input and plot it."""
        logger.info(f"Loading preset '{name}'.")
        self.input_panel.text_edit.setPlainText(k)
        self.store.plot()
