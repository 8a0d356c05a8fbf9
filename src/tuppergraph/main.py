"""
Application Initialization
==========================
This module constructs the Model-View architecture and starts the Qt Event
Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Store holding the plot state.
2. Instantiates the Main Window (View).
3. Passes the Store into the View so they can communicate.
"""
import logging
import sys

from tuppergraph.app.application import create_app
from tuppergraph.app.state import Store
from tuppergraph.logging_config import setup_logging
from tuppergraph.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging (TUPPERGRAPH_LOG_LEVEL=DEBUG to see the decoder)
    setup_logging()

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Store
    store = Store()

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()

    # 5. Plot the default value so the window opens on the formula itself
    store.plot()

    # 6. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
