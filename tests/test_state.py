"""Tests for the debounced calculator store."""

import pytest

from curveradius.app.state import MEASURED, PIPE_RADIUS, CalculatorStore
from curveradius.model.inputs import DebouncedInputs, InputPhase


def _record(signal) -> list:
    received = []
    signal.connect(lambda value: received.append(value))
    return received


def test_initial_state(store):
    assert store.measured is None
    assert store.pipe_radius == 11.0
    assert store.debounced == DebouncedInputs(measured=None, pipe_radius=11.0)
    assert not store.result.is_present
    assert store.phase(MEASURED) == InputPhase.EMPTY
    assert store.phase(PIPE_RADIUS) == InputPhase.COMMITTED
    assert not store.has_pending_commit()


def test_raw_value_updates_immediately(store):
    store.set_measurement_text("5")
    assert store.measured == 5.0
    # not yet visible to the calculation
    assert store.debounced.measured is None
    assert store.has_pending_commit()
    assert store.phase(MEASURED) == InputPhase.SETTLING


def test_commit_after_settling(store, settle):
    results = _record(store.results_changed)
    store.set_measurement(5.0)
    settle()

    assert store.debounced == DebouncedInputs(measured=5.0, pipe_radius=11.0)
    assert len(results) == 1
    assert results[0].outer == pytest.approx(1002.5)
    assert results[0].inner == pytest.approx(991.5)
    assert store.phase(MEASURED) == InputPhase.COMMITTED


def test_burst_of_edits_commits_once_with_last_value(store, settle):
    commits = _record(store.inputs_committed)
    for text in ["1", "12", "1", "", "7"]:
        store.set_measurement_text(text)
    settle()

    assert commits == [DebouncedInputs(measured=7.0, pipe_radius=11.0)]
    assert store.result.outer == pytest.approx((4 * 49 + 40000) / 56)


def test_edit_restarts_timer(qapp, wait):
    store = CalculatorStore(settle_ms=300)
    commits = _record(store.inputs_committed)
    store.set_measurement(1.0)
    wait(150)
    store.set_measurement(2.0)
    wait(150)
    store.set_measurement(3.0)
    wait(150)
    # 450 ms since the first edit, but never 300 ms of quiet
    assert commits == []
    wait(600)
    assert commits == [DebouncedInputs(measured=3.0, pipe_radius=11.0)]
    store.close()


def test_both_fields_share_one_commit(store, settle):
    commits = _record(store.inputs_committed)
    store.set_measurement(5.0)
    store.set_pipe_radius(20.0)
    assert store.phase(MEASURED) == InputPhase.SETTLING
    assert store.phase(PIPE_RADIUS) == InputPhase.SETTLING
    settle()

    assert commits == [DebouncedInputs(measured=5.0, pipe_radius=20.0)]
    assert store.result.inner == pytest.approx(982.5)


def test_invalid_text_clears_result(store, settle):
    store.set_measurement(5.0)
    settle()
    assert store.result.is_present

    store.set_measurement_text("abc")
    settle()
    assert store.measured is None
    assert not store.result.is_present
    assert store.phase(MEASURED) == InputPhase.EMPTY


def test_zero_measurement_has_no_result(store, settle):
    store.set_measurement(0.0)
    settle()
    assert store.debounced.measured == 0.0
    assert store.result.inner is None
    assert store.result.outer is None


def test_empty_pipe_radius_has_no_result(store, settle):
    store.set_measurement(5.0)
    store.set_pipe_radius_text("")
    settle()
    assert not store.result.is_present
    assert store.phase(PIPE_RADIUS) == InputPhase.EMPTY


def test_reset_pipe_radius(store, settle):
    store.set_measurement(5.0)
    store.set_pipe_radius(30.0)
    settle()

    store.reset_pipe_radius()
    assert store.pipe_radius == 11.0
    assert store.debounced.pipe_radius == 30.0
    settle()
    assert store.debounced.pipe_radius == 11.0
    assert store.result.inner == pytest.approx(991.5)


def test_reset_from_empty_pipe_radius(store, settle):
    store.set_pipe_radius(None)
    settle()
    store.reset_pipe_radius()
    settle()
    assert store.debounced.pipe_radius == 11.0


def test_same_value_does_not_restart(store):
    changes = _record(store.measurement_changed)
    store.set_measurement_text("4")
    store.set_measurement_text("4.")
    assert changes == [4.0]


def test_unchanged_commit_keeps_result(store, settle):
    results = _record(store.results_changed)
    store.set_measurement(5.0)
    store.set_measurement(None)
    settle()
    assert results == []


def test_close_drops_pending_commit(qapp, settle):
    store = CalculatorStore(settle_ms=50)
    commits = _record(store.inputs_committed)
    store.set_measurement(5.0)
    store.close()
    assert not store.has_pending_commit()
    settle()
    assert commits == []

    store.set_measurement(6.0)
    settle()
    assert commits == []
    assert store.debounced.measured is None


def test_phase_signal_follows_edit_and_commit(store, settle):
    phases = []
    store.phase_changed.connect(lambda name, phase: phases.append((name, InputPhase(phase))))

    store.set_measurement_text("5")
    store.set_measurement_text("")
    assert phases == [
        (MEASURED, InputPhase.TYPING),
        (MEASURED, InputPhase.SETTLING),
        (MEASURED, InputPhase.TYPING),
        (MEASURED, InputPhase.SETTLING),
    ]

    settle()
    assert phases[-1] == (MEASURED, InputPhase.EMPTY)

    phases.clear()
    store.set_pipe_radius(20.0)
    settle()
    assert phases == [
        (PIPE_RADIUS, InputPhase.TYPING),
        (PIPE_RADIUS, InputPhase.SETTLING),
        (PIPE_RADIUS, InputPhase.COMMITTED),
    ]
