"""
Curve radius from a chord and its sagitta.

The gauge touches the pipe at two points a fixed chord length apart and reads
the perpendicular deviation (sagitta) in the middle. The radius of the circle
through those three points is

    R = (4 * s**2 + L**2) / (8 * s)

which is the radius at the measured surface of the pipe. The centerline radius
is smaller by the pipe cross-section radius.
"""
from __future__ import annotations

from curveradius.config import POINTS_DISTANCE_MM


def compute_outer_radius(sagitta: float, chord: float = POINTS_DISTANCE_MM) -> float:
    """
    Radius of the curve at the point of measurement.

    Args:
        sagitta: Measured deviation from the chord in mm. Must be non-zero.
        chord: Distance between the two contact points in mm.

    Returns:
        The curve radius in mm.

    Raises:
        ValueError: If the sagitta is zero (the curve is a straight line).
    """
    if sagitta == 0:
        raise ValueError(f"Sagitta must be non-zero, got {sagitta!r}.")
    return (4.0 * sagitta ** 2 + chord ** 2) / (8.0 * sagitta)


def compute_inner_radius(sagitta: float, chord: float, pipe_radius: float) -> float:
    """Radius of the curve at the pipe centerline."""
    return compute_outer_radius(sagitta, chord) - pipe_radius
