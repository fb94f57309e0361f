"""Project Tracker: console-driven project and customer tracking."""

__version__ = "1.0.0"
