"""Utility modules for pinned repos."""

from .singleflight import SingleFlight

__all__ = ["SingleFlight"]
