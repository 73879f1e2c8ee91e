# Headless Qt for the presentation adapter tests. Core tests never touch Qt;
# the qapp fixture skips cleanly when PyQt6 is not installed.

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication(sys.argv)
    return app
