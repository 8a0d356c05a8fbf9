import pytest

from tuppergraph.model.state import Action, PlotState

pytest.importorskip("PySide6")

from tuppergraph.app.state import Store  # noqa: E402


@pytest.fixture
def store():
    return Store(PlotState(text="17"))


@pytest.fixture
def received(store):
    events = {"grid": [], "text": [], "error": []}
    store.grid_changed.connect(events["grid"].append)
    store.text_changed.connect(events["text"].append)
    store.error_raised.connect(events["error"].append)
    return events


def test_plot_emits_grid(store, received):
    store.plot()
    assert len(received["grid"]) == 1
    assert received["grid"][0][0][0] == 1
    assert received["error"] == []


def test_bad_input_emits_error(store, received):
    store.set_text("abc")
    store.plot()
    assert received["grid"] == []
    assert len(received["error"]) == 1
    assert store.state.error == received["error"][0]


def test_clear_emits_text(store, received):
    store.clear()
    assert received["text"] == [""]
    assert received["grid"] == []


def test_set_text_is_silent(store, received):
    store.set_text("34")
    assert store.state.text == "34"
    assert received == {"grid": [], "text": [], "error": []}


def test_apply_by_name(store):
    store.apply("plot")
    assert store.state.grid.sum() == 1
    store.apply(Action.CLEAR)
    assert store.state.text == ""


def test_default_store_starts_on_formula():
    from tuppergraph.config import SELF_REFERENTIAL_K

    assert Store().state.text == SELF_REFERENTIAL_K


def test_clear_after_rejection_reports_error_gone():
    store = Store(PlotState(text=""))
    changes = []
    store.error_changed.connect(changes.append)

    store.plot()
    assert store.state.error
    store.clear()

    assert store.state.error is None
    assert changes == ["Please enter a value for k.", None]


def test_repeated_rejection_reports_error_once():
    store = Store(PlotState(text="abc"))
    changes = []
    store.error_changed.connect(changes.append)
    store.plot()
    store.plot()
    assert len(changes) == 1
