"""Weighted-score ranking and cross-tab reports for NBA season statistics."""

__version__ = "0.1.0"
