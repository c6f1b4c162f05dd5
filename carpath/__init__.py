"""Reeds-Shepp curves, trajectory smoothing and planning helpers for car-like vehicles."""

__version__ = "0.1.0"