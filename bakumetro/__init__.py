"""Threaded terminal simulation of trains on the Baku Metro lines."""

__version__ = "0.1.0"

__all__ = ["__version__"]