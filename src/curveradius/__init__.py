"""Curve radius calculator for bent pipes measured with a fixed-chord gauge."""

__version__ = "0.1.0"
