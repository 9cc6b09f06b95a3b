from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from curveradius.config import PIPE_DEFAULT_RADIUS_MM, SETTLE_TIME_MS
from curveradius.model.inputs import (
    DebouncedInputs, InputPhase, RadiusResult, derive_results, parse_numeric
)

logger = logging.getLogger(__name__)

MEASURED = "measured"
PIPE_RADIUS = "pipe_radius"


class CalculatorStore(QObject):
    """
    Session state of the calculator with signals for view sync.

    Raw values change on every keystroke. They reach the radius calculation
    only after no edit happened for `settle_ms`; a single-shot timer shared by
    both fields is restarted on each edit, so a burst of keystrokes produces
    one commit carrying the last values.
    """
    measurement_changed = Signal(object)
    pipe_radius_changed = Signal(object)
    phase_changed = Signal(str, int)
    inputs_committed = Signal(object)
    results_changed = Signal(object)

    def __init__(self, settle_ms: int = SETTLE_TIME_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._measured: Optional[float] = None
        self._pipe_radius: Optional[float] = PIPE_DEFAULT_RADIUS_MM
        self._debounced = DebouncedInputs(measured=None, pipe_radius=PIPE_DEFAULT_RADIUS_MM)
        self._result = derive_results(self._debounced)
        self._phases: dict[str, InputPhase] = {
            MEASURED: InputPhase.EMPTY,
            PIPE_RADIUS: InputPhase.COMMITTED,
        }
        self._closed = False

        self._commit_timer = QTimer(self)
        self._commit_timer.setSingleShot(True)
        self._commit_timer.setInterval(settle_ms)
        self._commit_timer.timeout.connect(self._commit)

    # ------------------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------------------

    @property
    def measured(self) -> Optional[float]:
        return self._measured

    @property
    def pipe_radius(self) -> Optional[float]:
        return self._pipe_radius

    @property
    def debounced(self) -> DebouncedInputs:
        return self._debounced

    @property
    def result(self) -> RadiusResult:
        return self._result

    def phase(self, field_name: str) -> InputPhase:
        return self._phases[field_name]

    def has_pending_commit(self) -> bool:
        return self._commit_timer.isActive()

    # ------------------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------------------

    def set_measurement(self, value: Optional[float]) -> None:
        if value == self._measured:
            return
        self._measured = value
        self.measurement_changed.emit(value)
        self._schedule_commit(MEASURED)

    def set_pipe_radius(self, value: Optional[float]) -> None:
        if value == self._pipe_radius:
            return
        self._pipe_radius = value
        self.pipe_radius_changed.emit(value)
        self._schedule_commit(PIPE_RADIUS)

    def set_measurement_text(self, text: str) -> None:
        self.set_measurement(parse_numeric(text))

    def set_pipe_radius_text(self, text: str) -> None:
        self.set_pipe_radius(parse_numeric(text))

    def reset_pipe_radius(self) -> None:
        """Put the pipe radius back to the standard pipe; results follow after settling."""
        logger.info(f"Pipe radius reset to {PIPE_DEFAULT_RADIUS_MM} mm.")
        self.set_pipe_radius(PIPE_DEFAULT_RADIUS_MM)

    def close(self) -> None:
        """Drop any pending commit. Edits after closing are no longer committed."""
        self._commit_timer.stop()
        self._closed = True
        logger.debug("Calculator session closed.")

    # ------------------------------------------------------------------------------
    # Debounce
    # ------------------------------------------------------------------------------

    def _set_phase(self, field_name: str, phase: InputPhase) -> None:
        if self._phases[field_name] != phase:
            self._phases[field_name] = phase
            self.phase_changed.emit(field_name, int(phase))

    def _schedule_commit(self, field_name: str) -> None:
        self._set_phase(field_name, InputPhase.TYPING)
        if self._closed:
            return
        # start() on an active timer restarts it
        self._commit_timer.start()
        self._set_phase(field_name, InputPhase.SETTLING)

    def _commit(self) -> None:
        snapshot = DebouncedInputs(measured=self._measured, pipe_radius=self._pipe_radius)
        values = {MEASURED: snapshot.measured, PIPE_RADIUS: snapshot.pipe_radius}
        for field_name, phase in list(self._phases.items()):
            if phase in (InputPhase.TYPING, InputPhase.SETTLING):
                settled = InputPhase.EMPTY if values[field_name] is None else InputPhase.COMMITTED
                self._set_phase(field_name, settled)

        logger.debug(f"Inputs committed: {snapshot}")
        self.inputs_committed.emit(snapshot)

        if snapshot == self._debounced:
            return
        self._debounced = snapshot
        self._result = derive_results(snapshot)
        logger.debug(f"Radius recomputed: {self._result}")
        self.results_changed.emit(self._result)
