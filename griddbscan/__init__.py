"""Exact grid-based DBSCAN clustering for points of 2 to 20 dimensions."""

__version__ = "0.1.0"