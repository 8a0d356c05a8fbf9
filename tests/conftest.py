import logging
import os

import pytest

from tuppergraph.config import NAME_K, SELF_REFERENTIAL_K
from tuppergraph.model.decoder import parse_k


@pytest.fixture(scope="session")
def tupper_k():
    """The value of k at which the formula plots itself."""
    return parse_k(SELF_REFERENTIAL_K)


@pytest.fixture(scope="session")
def name_k():
    return parse_k(NAME_K)


@pytest.fixture
def clean_package_logger():
    """Restore the package logger after tests that reconfigure it."""
    logger = logging.getLogger("tuppergraph")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the widget tests, rendered off-screen."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
