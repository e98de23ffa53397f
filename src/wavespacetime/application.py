from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

ORG_ID = "wavespacetime"
APP_ID = "wave-space-time-3d"

VISIBLE_APP_NAME = "Wave Space-Time 3D"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance, or return the running one."""
    existing = QApplication.instance()
    if existing is not None:
        return existing

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    return app
