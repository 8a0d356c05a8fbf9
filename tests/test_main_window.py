import numpy as np
import pytest

from tuppergraph.config import EMPTY_COLOR, FILLED_COLOR, NAME_K
from tuppergraph.model.decoder import decode, parse_k
from tuppergraph.model.state import PlotState

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtGui import QColor  # noqa: E402

from tuppergraph.app.state import Store  # noqa: E402
from tuppergraph.view.main_window import MainWindow  # noqa: E402
from tuppergraph.view.widgets.grid_view import GridView  # noqa: E402


def make_window(text):
    store = Store(PlotState(text=text))
    return store, MainWindow(store)


def brush_color(view, column, row):
    return view._cells[column][row].brush().color()


def test_grid_view_recolours_cells(qapp):
    view = GridView()
    view.set_grid(decode(17))
    assert brush_color(view, 0, 0) == QColor(FILLED_COLOR)
    assert brush_color(view, 0, 1) == QColor(EMPTY_COLOR)
    assert brush_color(view, 105, 16) == QColor(EMPTY_COLOR)

    view.set_grid(decode(0))
    assert brush_color(view, 0, 0) == QColor(EMPTY_COLOR)


def test_grid_cells_drawn_with_column_flip(qapp):
    view = GridView()
    rect = view._cells[0][0].rect()
    assert (rect.x(), rect.y()) == (105 * rect.width(), 0)


def test_plot_button_draws_grid(qapp):
    store, window = make_window("17")
    window.input_panel.btn_plot.click()

    assert store.state.grid[0][0] == 1
    assert brush_color(window.grid_view, 0, 0) == QColor(FILLED_COLOR)
    assert window.input_panel.status.text() == ""


def test_typing_updates_store(qapp):
    store, window = make_window("")
    window.input_panel.text_edit.setPlainText("34")
    window.input_panel.btn_plot.click()
    assert store.state.grid[0][1] == 1


def test_rejected_plot_shows_message_and_keeps_grid(qapp):
    store, window = make_window("17")
    panel = window.input_panel
    panel.btn_plot.click()

    panel.text_edit.setPlainText("abc")
    panel.btn_plot.click()

    assert panel.status.text() == store.state.error
    assert panel.status.text()
    assert brush_color(window.grid_view, 0, 0) == QColor(FILLED_COLOR)


def test_clear_button_empties_text(qapp):
    store, window = make_window("17")
    window.input_panel.btn_clear.click()
    assert window.input_panel.text_edit.toPlainText() == ""
    assert store.state.text == ""


def test_clear_after_rejected_empty_plot_clears_status(qapp):
    store, window = make_window("")
    panel = window.input_panel

    panel.btn_plot.click()
    assert panel.status.text() == "Please enter a value for k."

    panel.btn_clear.click()
    assert store.state.error is None
    assert panel.status.text() == ""


def test_fixed_input_clears_status(qapp):
    store, window = make_window("-1")
    panel = window.input_panel
    panel.btn_plot.click()
    assert panel.status.text()

    panel.text_edit.setPlainText("17")
    panel.btn_plot.click()
    assert panel.status.text() == ""


def test_preset_loads_and_plots(qapp):
    store, window = make_window("")
    window.preset_actions["Name"].trigger()

    assert window.input_panel.text_edit.toPlainText() == NAME_K
    np.testing.assert_array_equal(store.state.grid, decode(parse_k(NAME_K)))
    assert store.state.error is None
