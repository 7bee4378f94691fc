"""Fit scoring and ranking of club recruitment opportunities for players."""

__version__ = "0.1.0"
