"""Rankboard: anonymous people rating, comments and FaceMash comparisons."""

__version__ = "0.1.0"
