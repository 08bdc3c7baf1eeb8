"""
Application Initialization
==========================
This module wires the model, the controller and the main window together and
starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging from the environment ('LOGITLAB_LOG_LEVEL', 'LOGITLAB_LOG_FILE').
2. Instantiates the single LabState.
3. Passes the state into the Main Window, which builds the controller.
"""
import logging
import sys

from logitlab import config
from logitlab.app.application import create_app
from logitlab.logging_config import setup_logging
from logitlab.model.state import LabState


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)

    # 2. Create the Qt Application
    app = create_app()

    # Imported after create_app() so pyqtgraph binds to PySide6
    from logitlab.view.main_window import MainWindow

    # 3. Initialize the Data Model
    lab_state = LabState()
    logging.getLogger(__name__).info(f"Starting with {lab_state.dataset!r}")

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(lab_state)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
