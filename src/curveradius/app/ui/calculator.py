from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from PySide6.QtCore import Qt, Slot, QLocale
from PySide6.QtGui import QDoubleValidator, QFont
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QGridLayout, QLabel,
    QLineEdit, QPushButton, QFrame, QStyle
)

from curveradius.app.state import CalculatorStore
from curveradius.config import LENGTH_UNIT, RESULT_DECIMALS, RESULT_PLACEHOLDER
from curveradius.model.inputs import RadiusResult, parse_numeric


def format_radius(value: Optional[float]) -> str:
    """
    Format a radius for display.

    Examples:
        - format_radius(1000.625) -> "1,000.63 mm"
        - format_radius(None) -> "-- mm"
    """
    if value is None:
        return f"{RESULT_PLACEHOLDER} {LENGTH_UNIT}"
    # Round the exact binary value half up; float formatting would round 1000.625 down
    quantum = Decimal(1).scaleb(-RESULT_DECIMALS)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:,.{RESULT_DECIMALS}f} {LENGTH_UNIT}"


def format_input(value: Optional[float]) -> str:
    return "" if value is None else f"{value:g}"


class CalculatorWidget(QWidget):
    """
    Form with the two measurement inputs and the two resulting radii.

    The widget only forwards edits to the store and renders what the store
    emits; it never computes anything itself.
    """
    def __init__(self, store: CalculatorStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        root = QVBoxLayout(self)

        title = QLabel(self.tr("Track curve radius"), self)
        title_font = QFont(title.font())
        title_font.setPointSizeF(title_font.pointSizeF() * 1.6)
        title_font.setBold(True)
        title.setFont(title_font)
        root.addWidget(title)

        description = QLabel(
            self.tr("Enter measured values in millimeters to calculate the curve radius of the track."),
            self
        )
        description.setWordWrap(True)
        root.addWidget(description)

        # --- Inputs ---
        grp_inputs = QGroupBox("", self)
        grid = QGridLayout(grp_inputs)
        grid.setVerticalSpacing(8)

        grid.addWidget(QLabel(self.tr("Measured distance (mm)"), grp_inputs), 0, 0)
        self.edit_measured = QLineEdit(grp_inputs)
        self.edit_measured.setObjectName("firstValue")
        self.edit_measured.setPlaceholderText(self.tr("Readout from measurement device"))
        self.edit_measured.setValidator(self._make_validator())
        self.edit_measured.setText(format_input(store.measured))
        grid.addWidget(self.edit_measured, 1, 0, 1, 2)

        grid.addWidget(QLabel(self.tr("Pipe radius (mm)"), grp_inputs), 2, 0)
        self.btn_reset = QPushButton(self.tr("Reset to Default"), grp_inputs)
        self.btn_reset.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_BrowserReload))
        grid.addWidget(self.btn_reset, 2, 1, Qt.AlignmentFlag.AlignRight)
        self.edit_pipe_radius = QLineEdit(grp_inputs)
        self.edit_pipe_radius.setObjectName("secondValue")
        self.edit_pipe_radius.setValidator(self._make_validator())
        self.edit_pipe_radius.setText(format_input(store.pipe_radius))
        grid.addWidget(self.edit_pipe_radius, 3, 0, 1, 2)

        hint = QLabel(self.tr("Results will update automatically as you type"), grp_inputs)
        hint.setEnabled(False)
        grid.addWidget(hint, 4, 0, 1, 2)
        root.addWidget(grp_inputs)

        # --- Results ---
        results_frame = QFrame(self)
        results_frame.setFrameShape(QFrame.Shape.StyledPanel)
        results_layout = QVBoxLayout(results_frame)
        results_layout.addWidget(
            QLabel(self.tr("Track curve radius"), results_frame), 0, Qt.AlignmentFlag.AlignHCenter
        )
        row = QHBoxLayout()
        self.lbl_inner = self._add_result_column(row, self.tr("At pipe center"), results_frame)
        separator = QFrame(results_frame)
        separator.setFrameShape(QFrame.Shape.VLine)
        row.addWidget(separator)
        self.lbl_outer = self._add_result_column(row, self.tr("At point of measurement"), results_frame)
        results_layout.addLayout(row)
        root.addWidget(results_frame)
        root.addStretch()

        # wiring
        self.edit_measured.textEdited.connect(self.store.set_measurement_text)
        self.edit_pipe_radius.textEdited.connect(self.store.set_pipe_radius_text)
        self.btn_reset.clicked.connect(self.store.reset_pipe_radius)
        self.store.pipe_radius_changed.connect(self._on_pipe_radius_changed)
        self.store.results_changed.connect(self.show_result)

        self.show_result(store.result)

    @staticmethod
    def _make_validator() -> QDoubleValidator:
        validator = QDoubleValidator()
        validator.setBottom(0.0)
        validator.setNotation(QDoubleValidator.Notation.StandardNotation)
        # parse_numeric expects a dot as decimal separator
        validator.setLocale(QLocale.c())
        return validator

    @staticmethod
    def _add_result_column(row: QHBoxLayout, caption: str, parent: QWidget) -> QLabel:
        col = QVBoxLayout()
        col.addWidget(QLabel(caption, parent), 0, Qt.AlignmentFlag.AlignHCenter)
        value = QLabel(parent)
        font = QFont(value.font())
        font.setPointSizeF(font.pointSizeF() * 1.4)
        font.setBold(True)
        value.setFont(font)
        col.addWidget(value, 0, Qt.AlignmentFlag.AlignHCenter)
        row.addLayout(col, 1)
        return value

    @Slot(object)
    def _on_pipe_radius_changed(self, value: Optional[float]) -> None:
        # Leave the text alone while the user is typing something equivalent ("11." vs 11)
        if parse_numeric(self.edit_pipe_radius.text()) != value:
            self.edit_pipe_radius.setText(format_input(value))

    @Slot(object)
    def show_result(self, result: RadiusResult) -> None:
        self.lbl_inner.setText(format_radius(result.inner))
        self.lbl_outer.setText(format_radius(result.outer))
