"""Find the best single-day windows for a meeting."""

__version__ = "1.0.0"
