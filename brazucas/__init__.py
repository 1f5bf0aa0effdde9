"""Brazucas em Cork community backend."""

__version__ = "1.0.0"
