"""Adapters around the browsing core."""
