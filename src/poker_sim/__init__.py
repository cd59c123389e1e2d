"""Simplified multi-player poker simulation."""

__version__ = "0.1.0"
