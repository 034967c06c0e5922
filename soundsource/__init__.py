"""Composable audio sample sources and filters built on Python iterators."""

__version__ = "0.1.0"