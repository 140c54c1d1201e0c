"""Schulte table puzzle: click the numbers in order against the clock."""

__version__ = "0.1.0"