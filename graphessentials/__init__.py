"""Sparse graph formats, views, frontiers, operators and graph algorithms."""

__version__ = "2.0.0"