"""Cutting stock optimization for bar cut lists and panel layouts."""

__version__ = "1.0.0"
