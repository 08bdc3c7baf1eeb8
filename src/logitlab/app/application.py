from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import sys
import os

ORG_ID = "logitlab"
APP_ID = "logit-lab"

VISIBLE_APP_NAME = "The Logit Lab"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (reuses a running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")
    # pyqtgraph picks its Qt binding at import time
    os.environ.setdefault("PYQTGRAPH_QT_LIB", "PySide6")

    existing = QApplication.instance()
    if existing is not None:
        return existing

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    return app
