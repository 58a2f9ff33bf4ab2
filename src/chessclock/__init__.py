"""Tournament chess clock engine."""

__version__ = "0.1.0"
