"""
Application Initialization
==========================
Constructs the session state and the main window and starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root:
1. Sets up logging.
2. Instantiates the session state (CalculatorStore).
3. Passes it into the Main Window (View).
"""
import logging
import sys

from curveradius.app.application import create_app
from curveradius.app.state import CalculatorStore
from curveradius.app.ui.main_window import MainWindow
from curveradius.logging_config import setup_logging


def main() -> None:
    # Use logging.DEBUG to follow input commits while developing
    setup_logging(level=logging.INFO)

    app = create_app()

    store = CalculatorStore()
    window = MainWindow(store)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
