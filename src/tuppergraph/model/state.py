"""
Plot State (Data Model)
=======================
This module defines the state of the running application and the actions
that transform it.

Why is this file needed?
------------------------
1. State Management: The input text, the grid on screen and the last error
   live in one immutable value.
2. Decoupling: The buttons only name an action ("plot", "clear"); the handlers
   here take a state and return a new one, with no Qt involved.

Classes:
    Action: The named triggers.
    PlotState: The state container.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np

from tuppergraph.config import GRID_COLUMNS, GRID_ROWS, SELF_REFERENTIAL_K
from tuppergraph.model.decoder import InvalidInput, decode_text

if TYPE_CHECKING:
    from tuppergraph.model.decoder import Grid

logger = logging.getLogger(__name__)


class Action(StrEnum):
    PLOT = "plot"
    CLEAR = "clear"


def empty_grid() -> Grid:
    return np.zeros((GRID_COLUMNS, GRID_ROWS), dtype=np.uint8)


@dataclass(frozen=True, eq=False)
class PlotState:
    """
    Snapshot of the application.

    'grid' is the last successfully decoded grid; a rejected input leaves it
    untouched and sets 'error' instead.
    """
    text: str = SELF_REFERENTIAL_K
    grid: Grid = field(default_factory=empty_grid)
    error: Optional[str] = None


def set_text(state: PlotState, text: str) -> PlotState:
    return replace(state, text=text)


def plot(state: PlotState) -> PlotState:
    """Decode the current text and replace the grid."""
    try:
        grid = decode_text(state.text)
    except InvalidInput as e:
        logger.warning(f"Plot rejected: {e}")
        return replace(state, error=str(e))

    logger.info(f"Plotted k ({int(grid.sum())} filled cells).")
    return replace(state, grid=grid, error=None)


def clear(state: PlotState) -> PlotState:
    """Empty the input. The grid on screen stays as it is."""
    logger.info("Input cleared.")
    return replace(state, text="", error=None)


_HANDLERS: dict[Action, Callable[[PlotState], PlotState]] = {
    Action.PLOT: plot,
    Action.CLEAR: clear,
}


def dispatch(state: PlotState, action: Action | str) -> PlotState:
    """Apply the named action to the state."""
    try:
        handler = _HANDLERS[Action(action)]
    except ValueError:
        raise ValueError(f"Unknown action '{action}'.") from None
    return handler(state)
