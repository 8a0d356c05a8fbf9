import pytest

pytest.importorskip("PySide6.QtWidgets")

from tuppergraph.view.widgets.grid_view import cell_position  # noqa: E402


def test_first_column_drawn_on_the_right():
    assert cell_position(0, 0) == (105, 0)


def test_last_column_drawn_on_the_left():
    assert cell_position(105, 16) == (0, 16)


def test_rows_are_not_flipped():
    assert [cell_position(7, r)[1] for r in range(17)] == list(range(17))
