"""
Application Initialization
==========================
This module wires the Model and the View together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Global Data Model (DashboardState) inside the Store.
2. Instantiates the Main Window (View).
3. Passes the Store into the View so they can communicate.
4. Prevents circular import errors by being the orchestrator.
"""
import sys

import pyqtgraph as pg

from barnmonitor.app.application import create_app
from barnmonitor.app.state import Store
from barnmonitor.logging_config import setup_logging
from barnmonitor.model.state import DashboardState
from barnmonitor.view.main_window import MainWindow


def main() -> int:
    # 1. Setup Logging (Console + Optional File, overridable via environment)
    setup_logging()

    pg.setConfigOption("background", "w")
    pg.setConfigOption("foreground", "k")

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    store = Store(DashboardState())

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
