"""Faceted browsing over a static knowledge-base catalog."""

__version__ = "0.1.0"
