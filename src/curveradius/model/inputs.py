"""
Input Values & Derived Results
==============================
Plain data objects passed between the input pipeline and the views.

Classes:
    InputPhase: Lifecycle of a single input field.
    DebouncedInputs: Snapshot of both inputs after they settled.
    RadiusResult: The two radii derived from a snapshot.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from curveradius.config import PIPE_DEFAULT_RADIUS_MM, POINTS_DISTANCE_MM
from curveradius.model.formula import compute_outer_radius


class InputPhase(IntEnum):
    """Where an input field is between a keystroke and a recomputation."""
    EMPTY = 0
    TYPING = 1
    SETTLING = 2
    COMMITTED = 3


@dataclass(frozen=True)
class DebouncedInputs:
    """The only values the radius calculation ever reads."""
    measured: Optional[float] = None
    pipe_radius: Optional[float] = PIPE_DEFAULT_RADIUS_MM


@dataclass(frozen=True)
class RadiusResult:
    """Radius at the pipe centerline (inner) and at the measured surface (outer)."""
    inner: Optional[float] = None
    outer: Optional[float] = None

    @property
    def is_present(self) -> bool:
        return self.inner is not None and self.outer is not None


def parse_numeric(text: str) -> Optional[float]:
    """
    Convert raw field text to a number.

    Empty or unparsable text means "no value" and returns None. Negative
    numbers pass through; the input widgets keep the user above zero.
    """
    if not text or not text.strip():
        return None
    # float() also reads digit separators like "1_0"
    if "_" in text:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def derive_results(debounced: DebouncedInputs) -> RadiusResult:
    """
    Compute both radii from settled inputs.

    A missing or zero measurement (infinite radius) or a missing pipe radius
    yields an empty result rather than an error.
    """
    measured = debounced.measured
    pipe_radius = debounced.pipe_radius

    if measured is None or pipe_radius is None or measured == 0:
        return RadiusResult()

    outer = compute_outer_radius(measured, POINTS_DISTANCE_MM)
    return RadiusResult(inner=outer - pipe_radius, outer=outer)
