"""Kaboo: rule engine for the two-player memory card game."""

__version__ = "0.1.0"
