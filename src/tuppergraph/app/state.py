from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from tuppergraph.model.state import Action, PlotState, dispatch, set_text

logger = logging.getLogger(__name__)


class Store(QObject):
    """Central state store with signals for view sync."""
    grid_changed = Signal(object)
    text_changed = Signal(str)
    error_raised = Signal(str)
    error_changed = Signal(object)

    def __init__(self, state: PlotState | None = None) -> None:
        super().__init__()
        self._state = state if state is not None else PlotState()

    @property
    def state(self) -> PlotState:
        return self._state

    def set_text(self, text: str) -> None:
        # Mirrors the text field; no signal, the field already shows it
        self._state = set_text(self._state, text)

    def plot(self) -> None:
        self.apply(Action.PLOT)

    def clear(self) -> None:
        self.apply(Action.CLEAR)

    def apply(self, action: Action | str) -> None:
        old = self._state
        new = dispatch(old, action)
        self._state = new

        if new.text != old.text:
            self.text_changed.emit(new.text)
        if new.grid is not old.grid:
            self.grid_changed.emit(new.grid)
        if new.error != old.error:
            self.error_changed.emit(new.error)
        if new.error is not None:
            self.error_raised.emit(new.error)
