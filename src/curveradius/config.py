"""
Configuration & Constants
=========================
This module serves as the central registry for the measurement constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (chord length, default pipe radius)
   scattered throughout the model and the widgets.
2. Consistency: The formula, the input pipeline and the result formatting all
   read the same values.

Exports:
    PIPE_DEFAULT_RADIUS_MM (float): Cross-section radius of the standard pipe.
    POINTS_DISTANCE_MM (float): Distance between the two gauge contact points.
    SETTLE_TIME_MS (int): How long input has to be stable before it is committed.
"""

# Measurement gauge
PIPE_DEFAULT_RADIUS_MM: float = 11.0
POINTS_DISTANCE_MM: float = 200.0

# Input debounce
SETTLE_TIME_MS: int = 300

# Result display
LENGTH_UNIT: str = "mm"
RESULT_DECIMALS: int = 2
RESULT_PLACEHOLDER: str = "--"
