"""Polymarket Bitcoin ladder scanner."""

__version__ = "0.1.0"
