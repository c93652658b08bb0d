"""Interactive database of university students and workers, with PESEL validation."""

__version__ = "0.1.0"