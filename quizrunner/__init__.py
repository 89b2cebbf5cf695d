"""Data-driven browser test runner for the quiz game page."""

__version__ = "0.1.0"
