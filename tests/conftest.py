"""Shared test fixtures."""

from __future__ import annotations

import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QEventLoop, QTimer
from PySide6.QtWidgets import QApplication

from curveradius.app.state import CalculatorStore


# Short enough to keep the suite fast, long enough that a burst of
# synchronous edits always lands inside one window.
TEST_SETTLE_MS = 100


def wait_ms(ms: int) -> None:
    """Run the Qt event loop for `ms` milliseconds so timers can fire."""
    loop = QEventLoop()
    QTimer.singleShot(ms, loop.quit)
    loop.exec()


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def store(qapp) -> CalculatorStore:
    s = CalculatorStore(settle_ms=TEST_SETTLE_MS)
    yield s
    s.close()


@pytest.fixture
def settle():
    """Wait until a pending commit has certainly fired."""
    return lambda: wait_ms(TEST_SETTLE_MS * 3)


@pytest.fixture
def wait():
    return wait_ms
