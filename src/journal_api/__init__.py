"""Journal API - backend for a social journaling application."""

__version__ = "0.1.0"
