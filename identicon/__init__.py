"""Deterministic 3x3 tile identicons."""

__version__ = "0.1.0"
