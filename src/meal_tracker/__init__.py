"""Meal tracker - lunch and dinner log backed by a spreadsheet."""

__version__ = "0.1.0"
