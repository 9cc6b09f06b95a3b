"""
Main Application Window
=======================
Hosts the calculator form and owns the session state.

Why is this file needed?
------------------------
1. Lifetime: The calculator session lives exactly as long as this window; a
   pending input commit is dropped when the window closes.
2. Layout: It gives the form a fixed width, like a card in the middle of the screen.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from curveradius.app.state import CalculatorStore
from curveradius.app.ui.calculator import CalculatorWidget


class MainWindow(QMainWindow):
    def __init__(self, store: CalculatorStore | None = None) -> None:
        super().__init__()
        self.store = store if store is not None else CalculatorStore(parent=self)

        main_widget = QWidget(self)
        self.setCentralWidget(main_widget)
        layout = QVBoxLayout(main_widget)

        self.calculator = CalculatorWidget(self.store, main_widget)
        self.calculator.setMaximumWidth(480)
        layout.addWidget(self.calculator, 0, Qt.AlignmentFlag.AlignHCenter)

        self.resize(520, 420)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.store.close()
        super().closeEvent(event)
